"""codemodel: build Java expressions as immutable trees and render them."""

from __future__ import annotations

from .decls import Method, Var
from .errors import CodeModelError, RenderError
from .expr import (
    FALSE,
    NULL,
    SUPER,
    THIS,
    TRUE,
    array_component,
    assign,
    assign_plus,
    assign_with_operator,
    cast,
    class_literal,
    field_ref,
    invoke,
    literal,
    literal_char,
    literal_double,
    literal_float,
    literal_long,
    new_array,
    new_instance,
    null_literal,
    raw_fragment,
    super_ref,
    this_field_ref,
    this_ref,
)
from .formatter import Formatter, render
from .jtypes import (
    ArrayType,
    ClassRef,
    JType,
    NarrowedClass,
    PrimitiveType,
    TypeVar,
    is_narrowed,
    narrow,
)
from .nodes import Expr
from .quoting import quotify
