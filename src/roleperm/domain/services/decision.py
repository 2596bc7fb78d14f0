"""Access decisions against an effective permission set."""

import re
from collections.abc import Sequence

from roleperm.domain.value_objects import LogicalOperator, PermissionSet

_DELIMITER = re.compile(r"\s*[,|]\s*")
_OPERATOR_HINT = re.compile(r"([,|])")


def parse_operator(permission: str | Sequence[str]) -> LogicalOperator | None:
    """Infer the operator from the expression: ``|`` is OR, ``,`` or a list is AND."""
    if not isinstance(permission, str):
        return LogicalOperator.AND
    match = _OPERATOR_HINT.search(permission)
    if not match:
        return None
    return LogicalOperator.OR if match.group(1) == "|" else LogicalOperator.AND


def split_expression(permission: str | Sequence[str]) -> list[str]:
    """Split a delimited expression (or a list of them) into single checks."""
    if isinstance(permission, str):
        if _OPERATOR_HINT.search(permission):
            return [p for p in _DELIMITER.split(permission.strip().lower()) if p]
        return [permission.strip()]
    parts: list[str] = []
    for item in permission:
        parts.extend(split_expression(item))
    return parts


def has_clearance(effective: PermissionSet, check: str) -> bool:
    """Evaluate one ``<clearance>.<slug>`` check. Anything unknown is False."""
    clearance, dot, slug = check.partition(".")
    if not dot or not clearance or not slug:
        return False
    return effective.get(slug, clearance)


def can(
    effective: PermissionSet,
    permission: str | Sequence[str],
    operator: str | LogicalOperator | None = None,
) -> bool:
    """Check ``permission`` against ``effective``.

    ``permission`` is ``"delete.posts.edit"`` (clearance, first dot, slug), a
    delimited string like ``"read.posts|update.posts"``, or a list of checks.
    An explicit ``operator`` overrides the inferred one.
    """
    op = LogicalOperator.parse(operator) if operator is not None else parse_operator(permission)
    checks = split_expression(permission)
    if not checks:
        return False
    if op is None and len(checks) == 1:
        return has_clearance(effective, checks[0])
    if op is LogicalOperator.OR:
        return any(has_clearance(effective, check) for check in checks)
    return all(has_clearance(effective, check) for check in checks)
