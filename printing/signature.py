# printing/signature.py
# This file is part of Redprint - Erlang trace message printing
#
# Signature rendering for module/function/arity-or-args triples

"""Render call signatures.

Elixir modules live under the ``Elixir.`` namespace and are shown without
it (``Elixir.Foo`` -> ``Foo``); every other module is an Erlang module and
is shown with a leading colon (``erlang`` -> ``:erlang``).
"""

from typing import Any

from model.signature import Signature
from .inspector import ELIXIR_PREFIX, inspect_term
from .options import FormatOptions


def translate_module(module: str) -> str:
    """Return the display name of `module`."""
    name = str(module)
    if name.startswith(ELIXIR_PREFIX):
        return name[len(ELIXIR_PREFIX):]
    return f":{name}"


def represent_signature(signature: Any, options: FormatOptions) -> str:
    """Render a Signature, or wrap an opaque atom/list as ``(<inspected>)``.

    Args:
        signature: Signature record or the opaque value found in its place
        options: Formatting options (currently unused by signatures)

    Returns:
        ``Module.function(arg, ...)`` or ``Module.function/arity``
    """
    if not isinstance(signature, Signature):
        return f"({inspect_term(signature)})"

    if signature.has_args:
        middle = ", ".join(inspect_term(arg) for arg in signature.args_or_arity)
        suffix = f"({middle})"
    else:
        suffix = f"/{signature.args_or_arity}"

    return f"{translate_module(signature.module)}.{signature.function}{suffix}"
