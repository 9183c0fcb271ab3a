"""Expression nodes.

Every node is a frozen dataclass. Composite nodes hold their children
directly; building a bigger expression always creates a new node.

Rendering dispatches over the closed set of variants below. A new variant
needs a case in render_expr, otherwise the formatter raises RenderError.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

from .errors import RenderError
from .jtypes import ArrayType, JType
from .quoting import quotify

if TYPE_CHECKING:
    from .formatter import Formatter


@dataclass(frozen=True)
class Expr:
    """Base for all expressions. Abstract."""

    def render(self, f: Formatter) -> None:
        """Emit this expression's source text into f."""
        render_expr(self, f)


# --- Leaves ---


@dataclass(frozen=True)
class Atom(Expr):
    """Preformatted source text: keywords, numeric and char literals."""

    text: str


@dataclass(frozen=True)
class StringLiteral(Expr):
    """String literal. Holds the raw value; escaping happens at render time."""

    value: str


@dataclass(frozen=True)
class ClassLiteral(Expr):
    """T.class

    Invariants:
    - basis is never a NarrowedClass
    """

    basis: JType


@dataclass(frozen=True)
class RawFragment(Expr):
    """Caller-supplied source emitted verbatim inside parentheses."""

    source: str


# --- References ---


@dataclass(frozen=True)
class FieldRef(Expr):
    """Field or variable reference: recv.name, this.name, or name.

    Invariants:
    - explicit_this implies receiver is None
    """

    receiver: Expr | JType | None
    name: str
    explicit_this: bool = False


@dataclass(frozen=True)
class ArrayCompRef(Expr):
    """Array indexing: array[index]"""

    array: Expr
    index: Expr


AssignTarget = FieldRef | ArrayCompRef


# --- Composites ---


@dataclass(frozen=True)
class Assignment(Expr):
    """target = value, or target op= value when op is set."""

    target: AssignTarget
    value: Expr
    op: str = ""


@dataclass(frozen=True)
class Invocation(Expr):
    """Method call or object construction.

    Semantics:
    - new_type set: new T(args)
    - receiver set: receiver.name(args)
    - otherwise: name(args)
    """

    receiver: Expr | JType | None
    name: str | None
    args: tuple[Expr, ...] = ()
    new_type: JType | None = None

    def arg(self, e: Expr) -> Invocation:
        """Return a copy with e appended to the argument list."""
        return replace(self, args=self.args + (e,))

    def with_args(self, *es: Expr) -> Invocation:
        """Return a copy with es appended to the argument list."""
        return replace(self, args=self.args + es)


@dataclass(frozen=True)
class Cast(Expr):
    """((T) expr)"""

    to_type: JType
    expr: Expr


@dataclass(frozen=True)
class ArrayCreation(Expr):
    """new T[size], new T[], or new T[] {a, b}

    Invariants:
    - component is erased
    """

    component: JType
    size: Expr | None = None
    elements: tuple[Expr, ...] = ()

    def add(self, e: Expr) -> ArrayCreation:
        """Return a copy with e appended to the initializer."""
        return replace(self, elements=self.elements + (e,))


# --- Rendering ---


def _receiver(f: Formatter, receiver: Expr | JType) -> None:
    if isinstance(receiver, JType):
        f.typ(receiver)
    else:
        f.expr(receiver)


def _list(f: Formatter, exprs: tuple[Expr, ...]) -> None:
    for i, e in enumerate(exprs):
        if i > 0:
            f.text(", ")
        f.expr(e)


def _array_creation(f: Formatter, node: ArrayCreation) -> None:
    # new int[][] with size n is spelled new int[n][]
    base = node.component
    dims = 0
    while isinstance(base, ArrayType):
        base = base.component
        dims += 1
    f.text("new ").typ(base)
    if node.size is None:
        f.text("[]")
    else:
        f.text("[").expr(node.size).text("]")
    f.text("[]" * dims)
    if node.elements:
        f.text(" {")
        _list(f, node.elements)
        f.text("}")


def render_expr(node: Expr, f: Formatter) -> None:
    """Emit node into f."""
    match node:
        case Atom(text=text):
            f.text(text)
        case StringLiteral(value=value):
            f.text(quotify('"', value))
        case ClassLiteral(basis=basis):
            f.typ(basis).text(".class")
        case RawFragment(source=source):
            f.text("(").text(source).text(")")
        case FieldRef(receiver=receiver, name=name, explicit_this=explicit_this):
            if receiver is not None:
                _receiver(f, receiver)
                f.text(".")
            elif explicit_this:
                f.text("this.")
            f.text(name)
        case ArrayCompRef(array=array, index=index):
            f.expr(array).text("[").expr(index).text("]")
        case Assignment(target=target, value=value, op=op):
            f.expr(target).text(" " + op + "= ").expr(value)
        case Invocation(new_type=new_type, receiver=receiver, name=name, args=args):
            if new_type is not None:
                f.text("new ").typ(new_type)
            else:
                if receiver is not None:
                    _receiver(f, receiver)
                    f.text(".")
                f.text(name or "")
            f.text("(")
            _list(f, args)
            f.text(")")
        case Cast(to_type=to_type, expr=expr):
            f.text("((").typ(to_type).text(") ").expr(expr).text(")")
        case ArrayCreation():
            _array_creation(f, node)
        case _:
            raise RenderError("no rendering for expression", node)
