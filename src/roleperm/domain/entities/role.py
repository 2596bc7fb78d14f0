"""Role entity for RBAC."""

from dataclasses import dataclass


@dataclass
class Role:
    """Role - named group of permissions assigned to users."""

    id: int
    name: str
    slug: str
    description: str | None = None
