"""Permission merging - role union plus user overrides."""

from collections.abc import Iterable, Sequence

from roleperm.domain.value_objects import ClearanceMap, PermissionSet


def merge_permission_sets(
    role_sets: Sequence[PermissionSet],
    override_set: PermissionSet | None = None,
) -> PermissionSet:
    """Merge role permission sets, then apply user overrides.

    Across roles the more permissive value wins: once any role grants a
    clearance it stays granted, whatever order the roles come in. Overrides
    replace role values per clearance, so they can revoke a role grant.
    """
    merged: dict[str, ClearanceMap] = {}

    for role_set in role_sets:
        for slug, clearances in role_set.items():
            current = merged.get(slug)
            if current is None:
                merged[slug] = clearances
                continue
            for clearance, value in clearances.items():
                current[clearance] = current.get(clearance, False) or value

    if override_set is not None:
        for slug, clearances in override_set.items():
            current = merged.get(slug)
            if current is None:
                merged[slug] = clearances
                continue
            current.update(clearances)

    return PermissionSet(merged)


def merge_override_records(overrides: Iterable[tuple[int, PermissionSet]]) -> PermissionSet:
    """Fold a user's override rows into one set, last write wins per clearance.

    Rows are applied in ascending permission id, so when two rows touch the
    same slug the higher id decides.
    """
    merged: dict[str, ClearanceMap] = {}
    for _, permission_set in sorted(overrides, key=lambda item: item[0]):
        for slug, clearances in permission_set.items():
            merged.setdefault(slug, {}).update(clearances)
    return PermissionSet(merged)
