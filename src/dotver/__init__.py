"""dotver - dotted numeric versions with wildcard-aware matching.

A package for parsing, ordering and matching versions such as "1.2.3" against
patterns such as "1.*", and for carrying them through Pydantic models.
"""

from ._version import __version__
from .exceptions import (
    ConfigError,
    EmptyVersionError,
    InvalidVersionError,
    VersionError,
)
from .serialization import dump_version, dump_version_json, load_version
from .types import Ordering, VersionLike, VersionNumbers
from .version import (
    DEFAULT_DELIMITER,
    SERIALIZER_DELIMITER,
    Version,
)
from .version_part import (
    MAX_PART_VALUE,
    WILDCARD,
    Number,
    VersionPart,
    Wildcard,
)

__all__ = [
    "DEFAULT_DELIMITER",
    "MAX_PART_VALUE",
    "SERIALIZER_DELIMITER",
    "WILDCARD",
    "ConfigError",
    "EmptyVersionError",
    "InvalidVersionError",
    "Number",
    "Ordering",
    "Version",
    "VersionError",
    "VersionLike",
    "VersionNumbers",
    "VersionPart",
    "Wildcard",
    "__version__",
    "dump_version",
    "dump_version_json",
    "load_version",
]
