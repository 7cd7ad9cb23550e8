"""Encode and decode versions through pydantic.

Versions travel as "x_x_x" strings so they stay intact in formats that give
dots a meaning of their own.
"""

from pydantic import TypeAdapter

from .version import Version

_VERSION_ADAPTER: TypeAdapter[Version] = TypeAdapter(Version)


def dump_version(version: Version) -> str:
    """Serialize a version.

    Args:
        version: Version to encode.

    Returns:
        The "x_x_x" form of the version.
    """
    return _VERSION_ADAPTER.dump_python(version)


def dump_version_json(version: Version) -> bytes:
    """Serialize a version as a JSON string value."""
    return _VERSION_ADAPTER.dump_json(version)


def load_version(data: str | bytes) -> Version:
    """Deserialize a version from its "x_x_x" form.

    Args:
        data: Encoded version. Bytes are treated as a JSON document.

    Returns:
        The decoded version.

    Raises:
        ValidationError: If the data is not a valid encoded version. There is
            no fallback value.
    """
    if isinstance(data, bytes):
        return _VERSION_ADAPTER.validate_json(data)
    return _VERSION_ADAPTER.validate_python(data)
