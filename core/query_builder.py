"""Query-string serialization for Helix resource URLs.

Values are inserted verbatim: no URL-encoding is applied, and falsy values
(None, "", 0, False, empty sequences) are dropped entirely.

Any iterable other than a string or mapping is a sequence; generators are
materialised first, so an empty one is dropped like an empty list. Sequence
elements are never filtered. Text coercion follows the API's JSON forms:
booleans become ``true``/``false``, ``None`` elements become ``null`` and
integral floats lose their ``.0``.
"""

from collections.abc import Iterable, Mapping as MappingABC
from typing import Any, Mapping, Optional
from config.settings import Config

SEPARATOR = "&"


def _stringify(value: Any) -> str:
    # Helix expects lowercase booleans
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "null"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _as_sequence(value: Any) -> Optional[list]:
    if isinstance(value, (str, bytes, MappingABC)) or not isinstance(value, Iterable):
        return None
    return list(value)


def serialize_options(options: Optional[Mapping[str, Any]]) -> str:
    """Serialize an options mapping into ``key=value&`` pairs.

    The result keeps the trailing separator; callers strip one character
    once the pairs are appended to the URL.
    """
    query = ""
    for key, value in (options or {}).items():
        elements = _as_sequence(value)
        if elements is not None:
            for element in elements:
                query += f"{key}={_stringify(element)}{SEPARATOR}"
        elif value:
            query += f"{key}={_stringify(value)}{SEPARATOR}"
    return query


def build_url(path: str, options: Optional[Mapping[str, Any]] = None,
              base: str = Config.HELIX_BASE) -> str:
    """
    Build the full request URL for a resource path.

    Args:
        path: Resource path under the base URL, e.g. "games/top"
        options: Ordered mapping of option names to values
        base: API base URL

    Returns:
        ``base + path + '?' + params`` with the last character removed,
        which drops either the trailing separator or, when no option was
        emitted, the bare question mark.
    """
    url = base + path + "?" + serialize_options(options)
    return url[:-1]
