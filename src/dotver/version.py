"""Models a dotted numeric version with wildcard-aware semantics."""

import logging
import re
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass, replace
from typing import Any, Self, TypeVar, overload

from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import PydanticCustomError, core_schema

from .exceptions import EmptyVersionError, InvalidVersionError
from .types import Delimiter, Ordering, VersionLike, VersionNumbers
from .version_part import MAX_PART_VALUE, WILDCARD, Number, VersionPart, Wildcard

logger = logging.getLogger(__name__)

DEFAULT_DELIMITER = "."
SERIALIZER_DELIMITER = "_"
_PART_PATTERN = r"0*(?:25[0-5]|2[0-4][0-9]|1?[0-9]?[0-9])"
SERIALIZED_PATTERN = rf"^(?:{_PART_PATTERN}_)*(?:{_PART_PATTERN}|\*)$"

_NUMBER_SEGMENT = re.compile(r"[0-9]+")

T = TypeVar("T")


def validate_delimiter(delimiter: Delimiter) -> None:
    """Reject delimiters that would make rendered versions ambiguous.

    Raises:
        ValueError: If the delimiter is empty or contains a digit or ``*``.
    """
    if not delimiter:
        raise ValueError("Delimiter must not be empty")
    if WILDCARD in delimiter or any(char.isdigit() for char in delimiter):
        raise ValueError(f"Delimiter {delimiter!r} clashes with version parts")


def _parse_parts(text: str, delimiter: Delimiter) -> tuple[VersionPart, ...] | None:
    """Split text into parts, stopping at the first wildcard.

    Returns:
        The parts, or None if any segment before a wildcard is not a number in
        range.
    """
    if not text:
        return None

    parts: list[VersionPart] = []
    for segment in text.split(delimiter):
        if segment == WILDCARD:
            parts.append(Wildcard(segment))
            break
        if not _NUMBER_SEGMENT.fullmatch(segment):
            return None
        # int() refuses very long digit strings, leading zeros included
        digits = segment.lstrip("0") or "0"
        if len(digits) > len(str(MAX_PART_VALUE)):
            return None
        value = int(digits)
        if value > MAX_PART_VALUE:
            return None
        parts.append(Number(value))

    return tuple(parts)


def _select_latest(
    candidates: Iterable[T], to_version: Callable[[T], "Version | None"]
) -> T | None:
    """Return the candidate whose version sorts highest.

    Candidates mapped to None are skipped. The earliest candidate wins ties.
    """
    latest: T | None = None
    latest_version: Version | None = None
    for candidate in candidates:
        version = to_version(candidate)
        if version is None:
            logger.debug("Skipping candidate %r", candidate)
            continue
        if latest_version is None or latest_version < version:
            latest, latest_version = candidate, version
    return latest


@dataclass(frozen=True, eq=False)
class Version:
    """Dotted numeric version of arbitrary depth.

    Each part is either a number or a wildcard. A wildcard can only be the last
    part. Equality and ordering only look at the parts both versions share, so
    ``1.2.3.4 == 1.2.3``. A wildcard anywhere in the shared parts makes two
    versions equal, while for sorting a wildcard counts as higher than any
    number.

    Versions are unhashable: wildcard-aware equality is not transitive.

    Attributes:
        parts: The version parts, most significant first.
    """

    parts: tuple[VersionPart, ...]

    __hash__ = None  # type: ignore[assignment]

    def __post_init__(self: Self) -> None:
        """Validate the parts.

        Raises:
            EmptyVersionError: If there are no parts.
            InvalidVersionError: If a wildcard is followed by further parts.
            TypeError: If a part is not a Number or Wildcard.
        """
        parts = tuple(self.parts)
        if not parts:
            raise EmptyVersionError()
        for index, part in enumerate(parts):
            if not isinstance(part, Number | Wildcard):
                raise TypeError(f"Expected a version part, got {part!r}")
            if part.is_wildcard() and index != len(parts) - 1:
                raise InvalidVersionError(
                    DEFAULT_DELIMITER.join(str(p) for p in parts),
                    "a wildcard must be the last part",
                )
        object.__setattr__(self, "parts", parts)

    # Construction

    @classmethod
    def new(cls, numbers: VersionNumbers) -> Self:
        """Create a version made only of numbers.

        Args:
            numbers: Part values, most significant first, each 0-255.

        Returns:
            The new version.

        Raises:
            EmptyVersionError: If numbers is empty.
            InvalidVersionError: If a value is out of range or not an integer.

        Example:
            >>> str(Version.new([1, 2, 3]))
            '1.2.3'
        """
        return cls(tuple(Number(number) for number in numbers))

    @classmethod
    def new_wildcard(cls) -> Self:
        """Create the ``*`` version, which every concrete version satisfies."""
        return cls((Wildcard(WILDCARD),))

    @classmethod
    def from_str(
        cls, text: str, delimiter: Delimiter = DEFAULT_DELIMITER
    ) -> Self | None:
        """Parse a version, returning None when the text is not a version.

        Segments are split on the delimiter. A ``*`` segment becomes a wildcard
        and anything after it is ignored.

        Args:
            text: Version string such as "1.2.3" or "1.*".
            delimiter: String separating the parts.

        Returns:
            Parsed version, or None if any segment is neither a number in range
            nor ``*``, or if text is empty.

        Raises:
            ValueError: If the delimiter is empty or contains digits or ``*``.
        """
        validate_delimiter(delimiter)
        if not isinstance(text, str):
            raise TypeError(
                f"Version text must be a string, got {type(text).__name__}"
            )

        parts = _parse_parts(text, delimiter)
        if parts is None:
            logger.debug("Could not parse %r as a version", text)
            return None
        return cls(parts)

    @classmethod
    def from_str_with(cls, text: str, delimiter: Delimiter) -> Self | None:
        """Parse a version that uses a custom delimiter, such as "1_2_3"."""
        return cls.from_str(text, delimiter)

    @classmethod
    def parse(cls, text: str, delimiter: Delimiter = DEFAULT_DELIMITER) -> Self:
        """Parse a version string.

        Args:
            text: Version string.
            delimiter: String separating the parts.

        Returns:
            Parsed version.

        Raises:
            InvalidVersionError: If text is not a valid version.
        """
        version = cls.from_str(text, delimiter)
        if version is None:
            raise InvalidVersionError(text)
        return version

    @classmethod
    def coerce(cls, value: VersionLike) -> "Version":
        """Return value as a Version, parsing it if it is a string.

        Raises:
            InvalidVersionError: If value is a string that is not a version.
            TypeError: If value is neither a string nor a Version.
        """
        if isinstance(value, Version):
            return value
        if isinstance(value, str):
            return cls.parse(value)
        raise TypeError(f"Expected str or Version, got {type(value).__name__}")

    def clone(self: Self) -> Self:
        """Return an independent copy of this version."""
        return replace(self)

    # Queries

    def has_wildcards(self: Self) -> bool:
        """Return True if any part is a wildcard."""
        return any(part.is_wildcard() for part in self.parts)

    def is_number(self: Self) -> bool:
        """Return True if every part is a number."""
        return all(part.is_number() for part in self.parts)

    def is_wildcard(self: Self) -> bool:
        """Return True if every part is a wildcard."""
        return all(part.is_wildcard() for part in self.parts)

    def shared_depth(self: Self, other: "Version") -> int:
        """Return how many leading parts both versions have."""
        return min(len(self.parts), len(other.parts))

    def is_compatible_with(self: Self, pattern: VersionLike) -> bool:
        """Check whether this concrete version satisfies a pattern.

        The check is directional. A version holding a wildcard is a pattern
        itself and satisfies nothing. A pattern's wildcard matches this part
        and every part after it.

        Args:
            pattern: Constraint such as "1.*", or a concrete version.

        Returns:
            True if this version is compatible with the pattern.

        Example:
            >>> Version.parse("0.1.0").is_compatible_with("0.*.*")
            True
            >>> Version.parse("1.1.*").is_compatible_with("1.*.*")
            False
        """
        pattern = Version.coerce(pattern)

        if self.has_wildcards():
            return False
        if pattern.is_wildcard():
            return True
        if self == pattern:
            return True

        for mine, theirs in zip(self.parts, pattern.parts):
            match mine, theirs:
                case Number(value=n), Number(value=m) if m != n:
                    return False
                case Number(), Wildcard():
                    return True

        return False

    @classmethod
    def from_latest(
        cls, candidates: Iterable[str], delimiter: Delimiter = DEFAULT_DELIMITER
    ) -> Self | None:
        """Return the highest concrete version among version strings.

        Strings that do not parse or hold a wildcard are skipped.

        Args:
            candidates: Version strings.
            delimiter: String separating the parts.

        Returns:
            Highest version, the first one seen on ties, or None if no string
            qualifies.
        """
        versions = (cls.from_str(text, delimiter) for text in candidates)
        return _select_latest(
            versions,
            lambda version: (
                version if version is not None and not version.has_wildcards() else None
            ),
        )

    from_latest_vec = from_latest

    def latest_compatible(
        self: Self, candidates: Iterable[str], delimiter: Delimiter = DEFAULT_DELIMITER
    ) -> str | None:
        """Return the highest version string compatible with this pattern.

        Args:
            candidates: Version strings.
            delimiter: String separating the parts of each candidate.

        Returns:
            The matching string itself, or None if no string parses and is
            compatible.
        """

        def compatible(text: str) -> Version | None:
            version = Version.from_str(text, delimiter)
            if version is None or not version.is_compatible_with(self):
                return None
            return version

        return _select_latest(candidates, compatible)

    def latest_compatible_version(
        self: Self, candidates: Iterable["Version"]
    ) -> "Version | None":
        """Return the highest version compatible with this pattern.

        Args:
            candidates: Versions to choose from.

        Returns:
            The matching element itself, or None if none is compatible.
        """
        return _select_latest(
            candidates,
            lambda version: version if version.is_compatible_with(self) else None,
        )

    # Comparison

    def compare(self: Self, other: "Version") -> Ordering:
        """Order two versions by their first differing shared part.

        Returns:
            -1, 0 or 1. Versions whose shared parts all match compare as 0,
            whatever their lengths.
        """
        for mine, theirs in zip(self.parts, other.parts):
            if mine != theirs:
                return mine.compare(theirs)
        return 0

    def __eq__(self: Self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        for mine, theirs in zip(self.parts, other.parts):
            if mine.is_wildcard() or theirs.is_wildcard():
                return True
            if mine != theirs:
                return False
        return True

    def __lt__(self: Self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self: Self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self: Self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self: Self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) >= 0

    # Sequence protocol

    def __len__(self: Self) -> int:
        return len(self.parts)

    def __iter__(self: Self) -> Iterator[VersionPart]:
        return iter(self.parts)

    @overload
    def __getitem__(self: Self, index: int) -> VersionPart: ...

    @overload
    def __getitem__(self: Self, index: slice) -> tuple[VersionPart, ...]: ...

    def __getitem__(
        self: Self, index: int | slice
    ) -> VersionPart | tuple[VersionPart, ...]:
        return self.parts[index]

    # Rendering

    def to_string_with(self: Self, delimiter: Delimiter) -> str:
        """Join the parts with the given delimiter."""
        return delimiter.join(str(part) for part in self.parts)

    def to_string(self: Self) -> str:
        """Return the version formatted as "x.x.x"."""
        return self.to_string_with(DEFAULT_DELIMITER)

    def to_string_serializer(self: Self) -> str:
        """Return the version formatted as "x_x_x" for serialized data."""
        return self.to_string_with(SERIALIZER_DELIMITER)

    def __str__(self: Self) -> str:
        return self.to_string()

    def __repr__(self: Self) -> str:
        return f"Version('{self.to_string()}')"

    # Pydantic integration

    @classmethod
    def _validate(cls, value: Any) -> "Version":
        if isinstance(value, Version):
            return value
        if isinstance(value, str):
            version = cls.from_str(value, SERIALIZER_DELIMITER)
            if version is not None:
                return version
        raise PydanticCustomError(
            "invalid_version",
            "Invalid version string: '{text}'",
            {"text": value},
        )

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        """Validate from "x_x_x" strings and serialize back to them."""
        return core_schema.no_info_plain_validator_function(
            cls._validate,
            serialization=core_schema.plain_serializer_function_ser_schema(
                cls.to_string_serializer,
                return_schema=core_schema.str_schema(),
            ),
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls, schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        return {
            "type": "string",
            "pattern": SERIALIZED_PATTERN,
            "examples": ["1_2_3", "1_*"],
        }
