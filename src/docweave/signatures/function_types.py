#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docweave/signatures/function_types.py
"""Recognition of synthetic function types.

The compiler models a lambda type ``(A, B) -> C`` as the generic type
``Function2<A, B, C>`` and an extension lambda ``R.(A) -> B`` as
``ExtensionFunction1<R, A, B>``. The name's arity must agree with the number
of type arguments (one extra for the return type, plus one for the receiver
of extension functions); a name whose arity disagrees is an ordinary generic
type.
"""

from __future__ import annotations

import re
from enum import Enum
from typing import Optional

from docweave.constants import EXTENSION_FUNCTION_TYPE_PREFIX, FUNCTION_TYPE_PREFIX


class FunctionTypeForm(Enum):
    """How a recognized function type is written."""

    FUNCTION = "function"
    EXTENSION_FUNCTION = "extension_function"


_NAME_RE = re.compile(
    rf"^(?P<prefix>{EXTENSION_FUNCTION_TYPE_PREFIX}|{FUNCTION_TYPE_PREFIX})(?P<arity>0|[1-9][0-9]*)$"
)

# Type arguments beyond the parameters: return type, plus the receiver
_EXTRA_ARGUMENTS = {
    FunctionTypeForm.FUNCTION: 1,
    FunctionTypeForm.EXTENSION_FUNCTION: 2,
}


def function_type_arity(name: str) -> Optional[tuple[FunctionTypeForm, int]]:
    """Parse the form and arity out of a synthetic function type name.

    Examples
    --------
        >>> function_type_arity("Function2")
        (<FunctionTypeForm.FUNCTION: 'function'>, 2)
        >>> function_type_arity("Functional") is None
        True

    """
    match = _NAME_RE.match(name)
    if match is None:
        return None
    form = (
        FunctionTypeForm.EXTENSION_FUNCTION
        if match.group("prefix") == EXTENSION_FUNCTION_TYPE_PREFIX
        else FunctionTypeForm.FUNCTION
    )
    return form, int(match.group("arity"))


def recognize_function_type(name: str, argument_count: int) -> Optional[FunctionTypeForm]:
    """Decide whether a type reference is a synthetic function type.

    Parameters
    ----------
    name : str
        Type name, e.g. ``"Function2"``
    argument_count : int
        Number of type arguments the reference carries

    Returns
    -------
    FunctionTypeForm or None
        The form to render, or None for an ordinary type

    """
    parsed = function_type_arity(name)
    if parsed is None:
        return None
    form, arity = parsed
    if argument_count != arity + _EXTRA_ARGUMENTS[form]:
        return None
    return form


def is_function_type(name: str, argument_count: int) -> bool:
    """Whether ``name`` with ``argument_count`` arguments is ``FunctionN``."""
    return recognize_function_type(name, argument_count) is FunctionTypeForm.FUNCTION


def is_extension_function_type(name: str, argument_count: int) -> bool:
    """Whether ``name`` with ``argument_count`` arguments is ``ExtensionFunctionN``."""
    return recognize_function_type(name, argument_count) is FunctionTypeForm.EXTENSION_FUNCTION
