# parser/lexer.py
# This file is part of Redprint - Erlang trace message printing
#
# Lexical analyzer for Erlang term text using SLY

"""Lexical analyzer for Erlang term text.

Tokenizes the subset of Erlang term syntax that recorded tracer messages
use, converting literal tokens into their Python values on the way.

Supported Tokens:
- Atoms: unquoted (``foo``) and quoted (``'Elixir.Foo'``)
- Numbers: signed integers and floats
- Strings: double-quoted with backslash escapes
- Pids: ``<0.150.0>``
- Punctuation: { } [ ] , . << >> #{ =>
- Comments: ``%`` to end of line, ignored
"""

import re

from sly import Lexer
from model.terms import Atom, Pid
from utils.logger import get_logger

_ESCAPE = re.compile(r"\\(.)", re.S)
_ESCAPE_CHARS = {"n": "\n", "t": "\t", "r": "\r", "s": " ", "e": "\x1b"}


def unescape(body: str) -> str:
    """Resolve backslash escapes inside a quoted atom or string body."""
    return _ESCAPE.sub(lambda m: _ESCAPE_CHARS.get(m.group(1), m.group(1)), body)


class TermLexer(Lexer):
    """SLY-based lexer for Erlang term text.

    Attributes:
        tokens: Set of valid token types
        ignore: Characters to skip during tokenization
    """

    tokens = {
        "PID",
        "BINSTART",
        "BINEND",
        "MAPSTART",
        "ARROW",
        "FLOAT",
        "INT",
        "STRING",
        "QATOM",
        "ATOM",
        "LBRACE",
        "RBRACE",
        "LBRACKET",
        "RBRACKET",
        "COMMA",
        "DOT",
    }

    ignore = " \t\r"
    ignore_comment = r"%[^\n]*"

    @_(r"\n+")
    def ignore_newline(self, t):
        self.lineno += len(t.value)

    @_(r"<\d+\.\d+\.\d+>")
    def PID(self, t):
        t.value = Pid.parse(t.value)
        return t

    BINSTART = r"<<"
    BINEND = r">>"
    MAPSTART = r"\#\{"
    ARROW = r"=>"

    @_(r"-?\d+\.\d+(?:[eE][-+]?\d+)?")
    def FLOAT(self, t):
        t.value = float(t.value)
        return t

    @_(r"-?\d+")
    def INT(self, t):
        t.value = int(t.value)
        return t

    @_(r'"(?:[^"\\]|\\.)*"')
    def STRING(self, t):
        t.value = unescape(t.value[1:-1])
        return t

    @_(r"'(?:[^'\\]|\\.)*'")
    def QATOM(self, t):
        t.value = Atom(unescape(t.value[1:-1]))
        return t

    @_(r"[a-z][a-zA-Z0-9_@]*")
    def ATOM(self, t):
        t.value = Atom(t.value)
        return t

    LBRACE = r"\{"
    RBRACE = r"\}"
    LBRACKET = r"\["
    RBRACKET = r"\]"
    COMMA = r","
    DOT = r"\."

    def error(self, t):
        """Handle illegal characters during tokenization.

        Args:
            t: SLY token object containing error context

        Raises:
            ValueError: Always raised with character and position information
        """
        logger = get_logger()

        illegal_char = t.value[0]
        error_pos = self.index

        logger.debug(f"Illegal character '{illegal_char}' at position {error_pos}")

        # Skip the illegal character
        self.index += 1

        raise ValueError(
            f"Illegal character '{illegal_char}' encountered at line "
            f"{self.lineno}, position {error_pos}"
        )
