"""Factory functions for expression nodes.

This module is the construction surface: callers build trees here and hand
them to a Formatter. Every function returns a new node, except the keyword
and boolean atoms, which are shared module constants.

Functions that accept a declaration handle (Method, Var) read its name
immediately; the resulting node has the same shape as one built from a
plain name.
"""

from __future__ import annotations

import logging
import math
import struct
from typing import overload

from .decls import Method, Var
from .jtypes import JType, is_narrowed
from .nodes import (
    ArrayCompRef,
    ArrayCreation,
    Assignment,
    AssignTarget,
    Atom,
    Cast,
    ClassLiteral,
    Expr,
    FieldRef,
    Invocation,
    RawFragment,
    StringLiteral,
)
from .quoting import quotify

logger = logging.getLogger(__name__)

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1
FLOAT_MAX = 3.4028234663852886e38

THIS = Atom("this")
SUPER = Atom("super")
NULL = Atom("null")
TRUE = Atom("true")
FALSE = Atom("false")


def _name(handle: str | Method | Var) -> str:
    if isinstance(handle, str):
        return handle
    return handle.name


def _check_receiver(receiver: object) -> None:
    if not isinstance(receiver, (Expr, JType)):
        name = type(receiver).__name__
        raise TypeError(f"receiver must be an expression or a type, not {name}")


# --- Assignment ---


def assign(target: AssignTarget, value: Expr) -> Assignment:
    """target = value"""
    return Assignment(target, value)


def assign_with_operator(target: AssignTarget, value: Expr, op: str) -> Assignment:
    """Compound assignment: assign_with_operator(x, y, "+") is x += y."""
    return Assignment(target, value, op)


def assign_plus(target: AssignTarget, value: Expr) -> Assignment:
    """target += value"""
    return Assignment(target, value, "+")


# --- Invocation ---


def new_instance(typ: JType) -> Invocation:
    """new T()"""
    return Invocation(None, None, new_type=typ)


@overload
def invoke(target: str | Method) -> Invocation: ...


@overload
def invoke(target: Expr | JType, method: str | Method) -> Invocation: ...


def invoke(
    target: Expr | JType | str | Method, method: str | Method | None = None
) -> Invocation:
    """Method call.

    invoke(name) and invoke(method) build an unqualified call: name().
    invoke(receiver, name) and invoke(receiver, method) build receiver.name();
    receiver may be an expression or a type (static call).
    """
    if method is None:
        return Invocation(None, _name(target))
    _check_receiver(target)
    return Invocation(target, _name(method))


# --- References ---


@overload
def field_ref(target: str | Var) -> FieldRef: ...


@overload
def field_ref(target: Expr | JType, field: str | Var) -> FieldRef: ...


def field_ref(
    target: Expr | JType | str | Var, field: str | Var | None = None
) -> FieldRef:
    """Field reference.

    field_ref(name) is a bare name; field_ref(receiver, name) is receiver.name.
    """
    if field is None:
        return FieldRef(None, _name(target))
    _check_receiver(target)
    return FieldRef(target, _name(field))


def this_field_ref(field: str | Var) -> FieldRef:
    """this.name"""
    return FieldRef(None, _name(field), explicit_this=True)


def class_literal(typ: JType) -> ClassLiteral:
    """T.class, using the unparameterized basis of a narrowed type."""
    if is_narrowed(typ):
        logger.debug("class literal drops type arguments of %s", typ.basis.fullname())
        return ClassLiteral(typ.basis)
    return ClassLiteral(typ)


def array_component(array: Expr, index: Expr) -> ArrayCompRef:
    """array[index]"""
    return ArrayCompRef(array, index)


def cast(typ: JType, e: Expr) -> Cast:
    """((T) e)"""
    return Cast(typ, e)


def new_array(typ: JType, size: Expr | int | None = None) -> ArrayCreation:
    """new T[size], or new T[] without a size.

    Arrays cannot have a generic component type, so typ is erased first.
    """
    if isinstance(size, int) and not isinstance(size, bool):
        size = literal(size)
    erased = typ.erasure()
    if erased != typ:
        logger.debug("array component type erased to %r", erased)
    return ArrayCreation(erased, size)


# --- Keywords ---


def this_ref() -> Atom:
    return THIS


def super_ref() -> Atom:
    return SUPER


def null_literal() -> Atom:
    return NULL


# --- Literals ---


def _float_text(value: float, suffix: str, box: str) -> str:
    if math.isnan(value):
        return box + ".NaN"
    if math.isinf(value):
        if value > 0:
            return box + ".POSITIVE_INFINITY"
        return box + ".NEGATIVE_INFINITY"
    return repr(float(value)) + suffix


def literal(value: bool | int | float | str) -> Expr:
    """Literal for a Python value.

    | Python | Java                                |
    |--------|-------------------------------------|
    | bool   | shared TRUE / FALSE                 |
    | int    | int, or long when outside int range |
    | float  | double                              |
    | str    | String                              |
    """
    match value:
        case bool():
            return TRUE if value else FALSE
        case int():
            if value < INT_MIN or value > INT_MAX:
                return literal_long(value)
            return Atom(str(value))
        case float():
            return literal_double(value)
        case str():
            return StringLiteral(value)
        case _:
            raise TypeError(f"no Java literal for {type(value).__name__}")


def literal_long(value: int) -> Atom:
    return Atom(str(value) + "L")


def _to_float32(value: float) -> float:
    return struct.unpack("<f", struct.pack("<f", value))[0]


def _float32_text(value: float) -> str:
    """Shortest digits that read back as the same 32-bit float."""
    for precision in range(1, 10):
        s = f"{value:.{precision}g}"
        if _to_float32(float(s)) == value:
            break
    if "." not in s and "e" not in s:
        s += ".0"
    return s


def literal_float(value: float) -> Atom:
    """Float literal. value is first rounded to 32 bits, the way javac reads it.

    Magnitudes beyond Float.MAX_VALUE become infinities; magnitudes below the
    smallest subnormal become 0.0F.
    """
    if math.isnan(value) or math.isinf(value):
        return Atom(_float_text(value, "F", "Float"))
    if abs(value) > FLOAT_MAX:
        return Atom(_float_text(math.copysign(math.inf, value), "F", "Float"))
    return Atom(_float32_text(_to_float32(value)) + "F")


def literal_double(value: float) -> Atom:
    return Atom(_float_text(value, "D", "Double"))


def literal_char(c: str) -> Atom:
    """Char literal: literal_char("\\n") renders '\\n'.

    c must be a single UTF-16 code unit; characters above U+FFFF have no
    char literal.
    """
    if len(c) != 1 or ord(c) > 0xFFFF:
        raise TypeError(f"char literal needs one UTF-16 code unit, got {c!r}")
    return Atom(quotify("'", c))


def raw_fragment(source: str) -> RawFragment:
    """Expression made directly from source text, emitted as (source).

    Nothing checks the fragment: invalid or ill-typed source ends up in the
    generated file as is. Prefer the structured factories.
    """
    logger.debug("raw fragment: %s", source)
    return RawFragment(source)
