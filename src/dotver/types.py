"""Type aliases needed in the package."""

from collections.abc import Sequence
from typing import TYPE_CHECKING, Literal, TypeAlias

if TYPE_CHECKING:
    from .version import Version

Ordering: TypeAlias = Literal[-1, 0, 1]

Delimiter: TypeAlias = str
VersionText: TypeAlias = str
VersionNumbers: TypeAlias = Sequence[int]
VersionLike: TypeAlias = "str | Version"
