"""Domain exceptions."""


class RolePermError(Exception):
    """Base exception for roleperm."""

    pass


class NotFoundError(RolePermError):
    """A permission reference did not resolve to a stored record."""

    def __init__(self, entity: str, key: object) -> None:
        self.entity = entity
        self.key = key
        super().__init__(f"{entity} not found: {key}")


class InvalidArgumentError(RolePermError, ValueError):
    """Malformed input, such as an unsupported permission reference type."""

    pass
