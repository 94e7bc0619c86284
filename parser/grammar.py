# parser/grammar.py
# This file is part of Redprint - Erlang trace message printing
#
# LALR(1) grammar and parser for Erlang term text using SLY

"""Erlang term grammar implementation using SLY parser generator.

The parser reads a sequence of dot-terminated terms, the layout used by
``file:consult/1``, and builds the matching Python values:

- Atoms -> `Atom`, pids -> `Pid`
- Tuples -> tuple, lists -> list, maps -> dict
- Binaries -> bytes, strings -> str, integers and floats as-is
"""

from sly import Parser
from .lexer import TermLexer
from .exceptions import ParseError
from utils.logger import get_logger


class _TermParser(Parser):
    """SLY-based LALR(1) parser for dot-terminated Erlang terms.

    Attributes:
        tokens: Token types from TermLexer
    """

    tokens = TermLexer.tokens

    @_("term_list")
    def start(self, p):
        """Start rule: the input is a sequence of terminated terms."""
        return p.term_list

    @_("term DOT")
    def term_list(self, p):
        return [p.term]

    @_("term_list term DOT")
    def term_list(self, p):
        p.term_list.append(p.term)
        return p.term_list

    # Scalar terms
    @_("ATOM", "QATOM", "INT", "FLOAT", "STRING", "PID")
    def term(self, p):
        return p[0]

    # Compound terms
    @_("tuple_term", "list_term", "binary_term", "map_term")
    def term(self, p):
        return p[0]

    @_("LBRACE RBRACE")
    def tuple_term(self, p):
        return ()

    @_("LBRACE elements RBRACE")
    def tuple_term(self, p):
        return tuple(p.elements)

    @_("LBRACKET RBRACKET")
    def list_term(self, p):
        return []

    @_("LBRACKET elements RBRACKET")
    def list_term(self, p):
        return p.elements

    @_("term")
    def elements(self, p):
        return [p.term]

    @_("elements COMMA term")
    def elements(self, p):
        p.elements.append(p.term)
        return p.elements

    @_("BINSTART BINEND")
    def binary_term(self, p):
        return b""

    @_("BINSTART STRING BINEND")
    def binary_term(self, p):
        """Text binary such as <<"hello">>."""
        return p.STRING.encode("utf-8")

    @_("BINSTART byte_list BINEND")
    def binary_term(self, p):
        """Byte binary such as <<1,2,3>>; every byte must be 0..255."""
        return bytes(p.byte_list)

    @_("INT")
    def byte_list(self, p):
        return [p.INT]

    @_("byte_list COMMA INT")
    def byte_list(self, p):
        p.byte_list.append(p.INT)
        return p.byte_list

    @_("MAPSTART RBRACE")
    def map_term(self, p):
        return {}

    @_("MAPSTART pairs RBRACE")
    def map_term(self, p):
        return dict(p.pairs)

    @_("pair")
    def pairs(self, p):
        return [p.pair]

    @_("pairs COMMA pair")
    def pairs(self, p):
        p.pairs.append(p.pair)
        return p.pairs

    @_("term ARROW term")
    def pair(self, p):
        return (p.term0, p.term1)

    def parse(self, text: str) -> list:
        """Parse term text into a list of Python values.

        Args:
            text: Dot-terminated Erlang terms

        Returns:
            Parsed terms in input order; empty when the text holds no tokens

        Raises:
            ParseError: If the text contains illegal characters or syntax errors
        """
        logger = get_logger()
        logger.debug(f"Parsing term text ({len(text)} characters)")

        try:
            tokens = list(TermLexer().tokenize(text))
            if not tokens:
                return []

            result = super().parse(iter(tokens))
            if result is None:
                raise ParseError("Failed to parse terms (syntax error).")

            logger.debug(f"Successfully parsed {len(result)} term(s)")
            return result

        except ParseError:
            logger.debug("Parse error encountered")
            raise
        except Exception as e:
            logger.debug(f"Unexpected parsing error: {e}")
            raise ParseError(f"Parse failed: {e}") from e

    def error(self, token):
        """Handle syntax errors during parsing.

        Args:
            token: Problematic token or None for EOF errors

        Raises:
            ParseError: Always raises with detailed error information
        """
        if token:
            error_msg = (
                f"Syntax error near '{token.value}' "
                f"(type: {token.type}) at line {token.lineno}, position {token.index}"
            )
        else:
            error_msg = "Syntax error: Unexpected end of input (missing '.'?)"

        raise ParseError(error_msg)
