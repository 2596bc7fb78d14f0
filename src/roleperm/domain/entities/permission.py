"""Permission entity - named set of clearance flags."""

from dataclasses import dataclass, field
from datetime import datetime


@dataclass
class PermissionRecord:
    """Stored permission row.

    ``name`` is the slug callers check against (e.g. ``posts.edit``) and
    ``clearances`` maps clearance names (``create``, ``delete``...) to flags.
    ``inherit_id`` points at a parent permission whose clearances this one
    extends.
    """

    id: int
    name: str
    clearances: dict[str, bool] = field(default_factory=dict)
    description: str | None = None
    inherit_id: int | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
