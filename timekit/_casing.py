"""Key-casing transforms for request and response bodies.

The Timekit API speaks snake_case on the wire while callers may build
payloads in camelCase. These helpers rewrite mapping keys at every nesting
depth of a JSON-like value and leave the values themselves untouched.

This is an internal module and should not be imported directly by users.
"""

import re
from typing import Any, Callable

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])([A-Z])|(?<=[A-Z])([A-Z])(?=[a-z])")
_SEPARATED_WORD = re.compile(r"[-_\s]+(.)?")


def decamelize(key: str) -> str:
    """Convert a camelCase key to snake_case.

    Keys that are already snake_case pass through unchanged.

    Args:
        key: The key to convert.

    Returns:
        The snake_case form of the key.
    """
    if key.isupper() or key.isnumeric():
        return key
    return _CAMEL_BOUNDARY.sub(lambda m: "_" + (m.group(1) or m.group(2)), key).lower()


def camelize(key: str) -> str:
    """Convert a snake_case key to camelCase.

    Hyphens and whitespace separate words just like underscores, and
    trailing separators are dropped (``foo-bar`` and ``foo bar`` both give
    ``fooBar``). Leading underscores are preserved so private-looking keys
    such as ``_links`` keep their prefix.

    Args:
        key: The key to convert.

    Returns:
        The camelCase form of the key.
    """
    stripped = key.lstrip("_")
    prefix = key[: len(key) - len(stripped)]
    if not stripped or key.isupper():
        return key
    converted = _SEPARATED_WORD.sub(lambda m: (m.group(1) or "").upper(), stripped)
    if not converted:
        return key
    return prefix + converted[0].lower() + converted[1:]


def _transform_keys(value: Any, convert: Callable[[str], str]) -> Any:
    if isinstance(value, dict):
        return {
            (convert(k) if isinstance(k, str) else k): _transform_keys(v, convert)
            for k, v in value.items()
        }
    if isinstance(value, (list, tuple)):
        return [_transform_keys(item, convert) for item in value]
    return value


def decamelize_keys(value: Any) -> Any:
    """Recursively convert every mapping key in ``value`` to snake_case."""
    return _transform_keys(value, decamelize)


def camelize_keys(value: Any) -> Any:
    """Recursively convert every mapping key in ``value`` to camelCase."""
    return _transform_keys(value, camelize)
