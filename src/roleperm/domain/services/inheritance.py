"""Permission inheritance - a permission extends its parent's clearances.

A row with ``inherit_id`` contributes to its root ancestor's slug: the
ancestors' clearances are laid down first and each descendant overrides
them per clearance.
"""

import logging
from collections.abc import Mapping

from roleperm.domain.entities import PermissionRecord
from roleperm.domain.value_objects import ClearanceMap, PermissionSet

logger = logging.getLogger(__name__)


def inheritance_chain(
    record: PermissionRecord,
    records_by_id: Mapping[int, PermissionRecord],
) -> list[PermissionRecord]:
    """Record followed by its ancestors, nearest first.

    Stops at a missing parent or at the first repeated id.
    """
    chain: list[PermissionRecord] = []
    seen: set[int] = set()
    current: PermissionRecord | None = record
    while current is not None:
        if current.id in seen:
            logger.warning("Permission inheritance cycle at permission %s", current.id)
            break
        seen.add(current.id)
        chain.append(current)
        if current.inherit_id is None:
            break
        current = records_by_id.get(current.inherit_id)
    return chain


def inherited_clearances(
    record: PermissionRecord,
    records_by_id: Mapping[int, PermissionRecord],
) -> ClearanceMap:
    """Clearances of record with its ancestors underneath; nearest wins."""
    return _fold(inheritance_chain(record, records_by_id))


def to_permission_set(
    record: PermissionRecord,
    records_by_id: Mapping[int, PermissionRecord] | None = None,
) -> PermissionSet:
    """Single-slug PermissionSet for record, keyed by its root ancestor's name."""
    chain = inheritance_chain(record, records_by_id or {})
    return PermissionSet({chain[-1].name: _fold(chain)})


def _fold(chain: list[PermissionRecord]) -> ClearanceMap:
    clearances: ClearanceMap = {}
    for ancestor in reversed(chain):
        clearances.update(ancestor.clearances)
    return clearances
