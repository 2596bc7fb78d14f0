"""Permission set - slug to clearance flags mapping."""

from collections.abc import Iterator, Mapping

ClearanceMap = dict[str, bool]


class PermissionSet:
    """Immutable mapping of permission slug to its clearance flags.

    A slug present in the set always has at least one clearance; slugs with
    an empty clearance map are dropped on construction. A missing slug or
    clearance reads as ``False`` (default-deny).
    """

    __slots__ = ("_entries",)

    def __init__(self, entries: Mapping[str, Mapping[str, bool]] | None = None) -> None:
        normalized: dict[str, ClearanceMap] = {}
        for slug, clearances in (entries or {}).items():
            if not clearances:
                continue
            normalized[str(slug)] = {str(k): bool(v) for k, v in clearances.items()}
        self._entries = normalized

    @classmethod
    def empty(cls) -> "PermissionSet":
        return cls()

    @classmethod
    def from_mapping(cls, entries: Mapping[str, Mapping[str, bool]]) -> "PermissionSet":
        return cls(entries)

    def slugs(self) -> list[str]:
        return list(self._entries)

    def clearances(self, slug: str) -> ClearanceMap:
        """Copy of the clearance map for slug, empty when absent."""
        return dict(self._entries.get(slug, {}))

    def get(self, slug: str, clearance: str) -> bool:
        return self._entries.get(slug, {}).get(clearance, False)

    def items(self) -> Iterator[tuple[str, ClearanceMap]]:
        for slug, clearances in self._entries.items():
            yield slug, dict(clearances)

    def to_dict(self) -> dict[str, ClearanceMap]:
        return {slug: dict(clearances) for slug, clearances in self._entries.items()}

    def to_dot_notation(self) -> dict[str, bool]:
        """Flatten to ``{"<clearance>.<slug>": flag}``."""
        return {
            f"{clearance}.{slug}": value
            for slug, clearances in self._entries.items()
            for clearance, value in clearances.items()
        }

    def __contains__(self, slug: object) -> bool:
        return slug in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __bool__(self) -> bool:
        return bool(self._entries)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, PermissionSet):
            return self._entries == other._entries
        if isinstance(other, Mapping):
            return self._entries == dict(other)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"PermissionSet({self._entries!r})"
