"""Logical operators for combining permission checks."""

from enum import StrEnum

from roleperm.domain.exceptions import InvalidArgumentError


class LogicalOperator(StrEnum):
    """How a list of permission checks is combined."""

    AND = "and"
    OR = "or"

    @classmethod
    def parse(cls, value: "str | LogicalOperator") -> "LogicalOperator":
        """Parse operator name, case-insensitive."""
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise InvalidArgumentError(
                f'Invalid operator {value!r}, available operators are "and", "or".'
            ) from None
