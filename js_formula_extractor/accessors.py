from __future__ import annotations

from typing import Any, Dict, Sequence

from .errors import ParseError

_MISSING = object()


def get_optional(obj: Dict[str, Any], key: str, default: Any = None) -> Any:
    """Return `obj[key]`, or `default` when the key is absent or null."""
    value = obj.get(key, _MISSING)
    if value is _MISSING or value is None:
        return default
    return value


def get_optional_str(obj: Dict[str, Any], key: str, default: str) -> str:
    value = get_optional(obj, key, default)
    if isinstance(value, (dict, list)):
        raise ParseError(f"Property '{key}' must be a string, got {type(value).__name__}.")
    return value if isinstance(value, str) else str(value)


def get_required_path(obj: Dict[str, Any], path: Sequence[str], context: str = '') -> Any:
    """Walk a chain of nested properties, failing loudly if any link is missing.

    `context` names the owning record in the error message.
    """
    val: Any = obj
    walked = []
    for key in path:
        walked.append(key)
        if not isinstance(val, dict) or val.get(key) is None:
            where = f" in {context}" if context else ''
            raise ParseError(f"Missing required property '{'.'.join(walked)}'{where}.")
        val = val[key]
    return val


def get_required_str(obj: Dict[str, Any], path: Sequence[str], context: str = '') -> str:
    value = get_required_path(obj, path, context)
    if isinstance(value, (dict, list)):
        where = f" in {context}" if context else ''
        raise ParseError(f"Property '{'.'.join(path)}'{where} must be a string.")
    return value if isinstance(value, str) else str(value)


def get_string_list(obj: Dict[str, Any], key: str, context: str = '') -> tuple:
    value = get_optional(obj, key, [])
    if not isinstance(value, list):
        where = f" in {context}" if context else ''
        raise ParseError(f"Property '{key}'{where} must be an array.")
    return tuple(v if isinstance(v, str) else str(v) for v in value if v is not None)
