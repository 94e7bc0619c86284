# printing/inspector.py
# This file is part of Redprint - Erlang trace message printing
#
# Default rendering of opaque Erlang terms

"""Render arbitrary Erlang terms the way Elixir's ``inspect`` shows them.

Pids, messages, return values and call arguments are opaque to the
representers; they all go through `inspect_term`.
"""

import re
from typing import Any

from model.terms import Atom, Pid

ELIXIR_PREFIX = "Elixir."

_BARE_ATOMS = {"nil", "true", "false"}
_IDENTIFIER_ATOM = re.compile(r"^[a-z_][a-zA-Z0-9_@]*[?!]?$")
_ALIAS = re.compile(r"^[A-Z][a-zA-Z0-9_]*(\.[A-Z][a-zA-Z0-9_]*)*$")
_ESCAPES = {"\\": "\\\\", '"': '\\"', "\n": "\\n", "\t": "\\t", "\r": "\\r"}


def inspect_term(value: Any) -> str:
    """Return the Elixir-style text form of `value`."""
    if value is None:
        return "nil"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Atom):
        return inspect_atom(value)
    if isinstance(value, str):
        return _quote(value)
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return repr(value)
    if isinstance(value, (bytes, bytearray)):
        return _inspect_binary(bytes(value))
    if isinstance(value, Pid):
        return f"#PID{value}"
    if isinstance(value, tuple):
        return "{" + ", ".join(inspect_term(item) for item in value) + "}"
    if isinstance(value, list):
        if value and all(_is_keyword_pair(item) for item in value):
            return "[" + _join_keywords(value) + "]"
        return "[" + ", ".join(inspect_term(item) for item in value) + "]"
    if isinstance(value, dict):
        return _inspect_map(value)
    return repr(value)


def inspect_atom(atom: str) -> str:
    if atom in _BARE_ATOMS:
        return str(atom)
    if atom.startswith(ELIXIR_PREFIX) and _ALIAS.match(atom[len(ELIXIR_PREFIX):]):
        return atom[len(ELIXIR_PREFIX):]
    if _IDENTIFIER_ATOM.match(atom):
        return f":{atom}"
    return f":{_quote(atom)}"


def _quote(text: str) -> str:
    escaped = "".join(_ESCAPES.get(char, char) for char in text)
    return f'"{escaped}"'


def _inspect_binary(data: bytes) -> str:
    try:
        text = data.decode("utf-8")
    except UnicodeDecodeError:
        text = None
    if text is not None and all(c in _ESCAPES or c.isprintable() for c in text):
        return _quote(text)
    return "<<" + ", ".join(str(byte) for byte in data) + ">>"


def _is_keyword_key(key: Any) -> bool:
    return isinstance(key, Atom) and bool(_IDENTIFIER_ATOM.match(key))


def _is_keyword_pair(item: Any) -> bool:
    return isinstance(item, tuple) and len(item) == 2 and _is_keyword_key(item[0])


def _join_keywords(pairs) -> str:
    return ", ".join(f"{key}: {inspect_term(value)}" for key, value in pairs)


def _inspect_map(value: dict) -> str:
    if value and all(_is_keyword_key(key) for key in value):
        return "%{" + _join_keywords(value.items()) + "}"
    body = ", ".join(
        f"{inspect_term(key)} => {inspect_term(item)}" for key, item in value.items()
    )
    return "%{" + body + "}"
