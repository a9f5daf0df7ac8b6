"""
Renderers — serialize structured config values into file content.

Generators describe every artifact as data (mappings, lists, lines)
and call one of these at the end. Output always ends with a newline.
"""

from __future__ import annotations

import json
import re
from typing import Any

_IDENTIFIER = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")
_INDENT = "  "


def render_json(value: Any) -> str:
    """Two-space JSON, keys in insertion order."""
    return json.dumps(value, indent=2, ensure_ascii=False) + "\n"


def render_lines(lines: list[str]) -> str:
    """One entry per line (ignore lists, shell scripts)."""
    return "\n".join(lines) + "\n"


def render_js_module(value: dict[str, Any], header: str = "") -> str:
    """A CommonJS module exporting ``value`` as an object literal.

    Args:
        value: Mapping to export.
        header: Optional text placed in a block comment above the export.
    """
    parts = []
    if header:
        comment = "\n".join(f" * {line}".rstrip() for line in header.splitlines())
        parts.append(f"/*\n{comment}\n */\n\n")
    parts.append(f"module.exports = {js_literal(value)};\n")
    return "".join(parts)


def js_literal(value: Any, depth: int = 0) -> str:
    """Render a Python value as a JavaScript literal."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return repr(value)
    if isinstance(value, str):
        return _js_string(value)
    if isinstance(value, dict):
        return _js_object(value, depth)
    if isinstance(value, (list, tuple)):
        return _js_array(list(value), depth)
    raise TypeError(f"Cannot render {type(value).__name__} as a JavaScript literal")


def _js_string(value: str) -> str:
    escaped = (
        value.replace("\\", "\\\\")
        .replace("'", "\\'")
        .replace("\n", "\\n")
    )
    return f"'{escaped}'"


def _js_key(key: str) -> str:
    return key if _IDENTIFIER.match(key) else _js_string(key)


def _js_object(value: dict[str, Any], depth: int) -> str:
    if not value:
        return "{}"
    pad = _INDENT * (depth + 1)
    body = "".join(
        f"{pad}{_js_key(str(k))}: {js_literal(v, depth + 1)},\n"
        for k, v in value.items()
    )
    return "{\n" + body + _INDENT * depth + "}"


def _js_array(items: list[Any], depth: int) -> str:
    if not items:
        return "[]"
    if not any(isinstance(item, (dict, list, tuple)) for item in items):
        return "[" + ", ".join(js_literal(item, depth) for item in items) + "]"
    pad = _INDENT * (depth + 1)
    body = "".join(f"{pad}{js_literal(item, depth + 1)},\n" for item in items)
    return "[\n" + body + _INDENT * depth + "]"
