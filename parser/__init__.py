# parser/__init__.py
# This file is part of Redprint - Erlang trace message printing
#
# Erlang term text parsing for recorded tracer messages

"""Erlang term text parsing.

Tracer messages can be recorded as Erlang term text, one dot-terminated term
per message, the same layout ``file:consult/1`` reads. This package turns
such text back into the raw message tuples the printing pipeline accepts.

Core Functions:
    parse_terms: Parse every term in a text
    parse_term: Parse a single term; the final '.' is optional

Example:
    >>> from parser import parse_term
    >>> parse_term("{recv, hello, {<0.1.0>, shell}, {1, 2, 3, 0}}")
    >>> # Returns (Atom('recv'), Atom('hello'), (Pid(0, 1, 0), Atom('shell')), (1, 2, 3, 0))
"""

from typing import Any, List

from .exceptions import ParseError
from .grammar import _TermParser
from .lexer import TermLexer
from utils.logger import get_logger


def parse_terms(source: str) -> List[Any]:
    """Parse dot-terminated Erlang terms into Python values.

    Uses a fresh parser instance for each invocation so that parsing keeps
    no state between calls.

    Args:
        source: Erlang term text

    Returns:
        Parsed terms in input order; empty for blank or comment-only text

    Raises:
        ParseError: Text is malformed or uses unsupported syntax
    """
    logger = get_logger()
    parser = _TermParser()

    try:
        return parser.parse(source)

    except ParseError:
        logger.debug("ParseError encountered during term parsing")
        raise

    except Exception as exc:
        logger.debug(f"Unexpected parsing error: {type(exc).__name__}: {exc}")
        raise ParseError(str(exc)) from exc


def parse_term(source: str) -> Any:
    """Parse exactly one Erlang term.

    Args:
        source: Erlang term text, with or without the terminating '.'

    Returns:
        The parsed Python value

    Raises:
        ParseError: Text is empty, malformed, or holds more than one term
    """
    try:
        tokens = list(TermLexer().tokenize(source))
    except ValueError as exc:
        raise ParseError(str(exc)) from exc

    if not tokens:
        raise ParseError("Input term is empty.")

    text = source
    if tokens[-1].type != "DOT":
        text += "\n."

    terms = parse_terms(text)
    if len(terms) != 1:
        raise ParseError(f"Expected exactly one term, found {len(terms)}.")
    return terms[0]


__all__ = ["parse_term", "parse_terms", "ParseError"]
