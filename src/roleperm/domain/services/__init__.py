"""Domain services - pure permission resolution logic."""

from roleperm.domain.services.decision import can, has_clearance, parse_operator, split_expression
from roleperm.domain.services.inheritance import (
    inheritance_chain,
    inherited_clearances,
    to_permission_set,
)
from roleperm.domain.services.merger import merge_override_records, merge_permission_sets

__all__ = [
    "can",
    "has_clearance",
    "inheritance_chain",
    "inherited_clearances",
    "merge_override_records",
    "merge_permission_sets",
    "parse_operator",
    "split_expression",
    "to_permission_set",
]
