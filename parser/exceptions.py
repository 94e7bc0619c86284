# parser/exceptions.py
# This file is part of Redprint - Erlang trace message printing
#
# Custom exceptions for Erlang term parsing

"""Domain-specific exceptions for reading Erlang term text."""


class ParseError(RuntimeError):
    """Exception raised when term text cannot be parsed.

    Indicates that the input does not conform to the supported Erlang term
    syntax. Used throughout the parsing pipeline to provide consistent error
    handling.
    """

    pass
