"""Single segments of a dotted version."""

from dataclasses import dataclass
from typing import Self, TypeAlias

from .exceptions import InvalidVersionError
from .types import Ordering

MAX_PART_VALUE = 255
WILDCARD = "*"


class _Part:
    """Ordering operators shared by both part variants.

    Ordering is a sorting convention only: two wildcards sort as equal but are
    never ``==``.
    """

    __slots__ = ()

    def is_number(self: Self) -> bool:
        """Return True if this part is a concrete number."""
        return isinstance(self, Number)

    def is_wildcard(self: Self) -> bool:
        """Return True if this part is a wildcard."""
        return isinstance(self, Wildcard)

    def compare(self: Self, other: "VersionPart") -> Ordering:
        """Compare two parts for sorting.

        Args:
            other: Part to compare against.

        Returns:
            -1, 0 or 1 as this part sorts before, level with, or after other.
        """
        return compare_parts(self, other)  # type: ignore[arg-type]

    def __lt__(self: Self, other: object) -> bool:
        if not isinstance(other, _Part):
            return NotImplemented
        return self.compare(other) < 0  # type: ignore[arg-type]

    def __le__(self: Self, other: object) -> bool:
        if not isinstance(other, _Part):
            return NotImplemented
        return self.compare(other) <= 0  # type: ignore[arg-type]

    def __gt__(self: Self, other: object) -> bool:
        if not isinstance(other, _Part):
            return NotImplemented
        return self.compare(other) > 0  # type: ignore[arg-type]

    def __ge__(self: Self, other: object) -> bool:
        if not isinstance(other, _Part):
            return NotImplemented
        return self.compare(other) >= 0  # type: ignore[arg-type]


@dataclass(frozen=True, eq=False)
class Number(_Part):
    """A concrete version number.

    Attributes:
        value: Integer between 0 and MAX_PART_VALUE.
    """

    value: int

    def __post_init__(self: Self) -> None:
        """Validate the part value.

        Raises:
            InvalidVersionError: If value is not an integer in range.
        """
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise InvalidVersionError(repr(self.value), "part must be an integer")
        if not 0 <= self.value <= MAX_PART_VALUE:
            raise InvalidVersionError(
                str(self.value), f"part must be between 0 and {MAX_PART_VALUE}"
            )

    def __eq__(self: Self, other: object) -> bool:
        if not isinstance(other, _Part):
            return NotImplemented
        return isinstance(other, Number) and self.value == other.value

    def __hash__(self: Self) -> int:
        return hash(self.value)

    def __str__(self: Self) -> str:
        return str(self.value)

    def __repr__(self: Self) -> str:
        return f"Number({self.value})"


@dataclass(frozen=True, eq=False)
class Wildcard(_Part):
    """A part that matches any number at its position.

    A wildcard proves nothing about the version it stands in for, so it is
    never equal to anything, not even another wildcard with the same text.

    Only the standard ``*`` literal survives a render and parse round trip.
    Text holding digits is rejected, since it would render like a number.

    Attributes:
        text: The literal that was matched, rendered back verbatim.
    """

    text: str = WILDCARD

    def __post_init__(self: Self) -> None:
        """Validate the wildcard literal.

        Raises:
            InvalidVersionError: If text is empty, not a string or holds a
                digit.
        """
        if not isinstance(self.text, str) or not self.text:
            raise InvalidVersionError(repr(self.text), "wildcard text must be set")
        if any(char.isdigit() for char in self.text):
            raise InvalidVersionError(self.text, "wildcard text must not hold digits")

    def __eq__(self: Self, other: object) -> bool:
        if not isinstance(other, _Part):
            return NotImplemented
        return False

    def __hash__(self: Self) -> int:
        return object.__hash__(self)

    def __str__(self: Self) -> str:
        return self.text

    def __repr__(self: Self) -> str:
        return f"Wildcard({self.text!r})"


VersionPart: TypeAlias = Number | Wildcard


def compare_parts(left: VersionPart, right: VersionPart) -> Ordering:
    """Order two parts, with a wildcard sorting above every number.

    Args:
        left: First part.
        right: Second part.

    Returns:
        -1, 0 or 1.

    Raises:
        TypeError: If either argument is not a version part.
    """
    match left, right:
        case Wildcard(), Wildcard():
            return 0
        case Wildcard(), Number():
            return 1
        case Number(), Wildcard():
            return -1
        case Number(value=a), Number(value=b):
            if a < b:
                return -1
            return 1 if a > b else 0
    raise TypeError(f"Cannot compare {left!r} with {right!r}")
