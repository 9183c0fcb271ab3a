"""Render sink that turns expression trees into Java source text."""

from __future__ import annotations

from .errors import RenderError
from .jtypes import ArrayType, ClassRef, JType, NarrowedClass, PrimitiveType, TypeVar
from .nodes import Expr


class Formatter:
    """Accumulates source text with indentation tracking.

    text/expr/typ append to the current line and return self so calls chain:
    f.expr(lhs).text(" = ").expr(rhs).
    """

    def __init__(self, indent_str: str = "    ") -> None:
        self.indent: int = 0
        self.lines: list[str] = []
        self._current: list[str] = []
        self._indent_str = indent_str

    def text(self, s: str) -> Formatter:
        """Append literal text to the current line."""
        self._current.append(s)
        return self

    def expr(self, e: Expr) -> Formatter:
        """Render a nested expression into the current line."""
        if not isinstance(e, Expr):
            raise RenderError("not an expression", e)
        e.render(self)
        return self

    def typ(self, t: JType) -> Formatter:
        """Render a type reference into the current line."""
        self._current.append(self._type(t))
        return self

    def _type(self, t: JType) -> str:
        match t:
            case PrimitiveType(name=name):
                return name
            case ClassRef():
                return t.fullname()
            case NarrowedClass(basis=basis, type_args=type_args):
                args = ", ".join(self._type(a) for a in type_args)
                return f"{basis.fullname()}<{args}>"
            case ArrayType(component=component):
                return self._type(component) + "[]"
            case TypeVar(name=name):
                return name
            case _:
                raise RenderError("not a type", t)

    def line(self, suffix: str = "") -> Formatter:
        """Finish the current line, prefixed with the current indentation."""
        content = "".join(self._current) + suffix
        self._current = []
        if content:
            self.lines.append(self._indent_str * self.indent + content)
        else:
            self.lines.append("")
        return self

    def indent_in(self) -> Formatter:
        self.indent += 1
        return self

    def indent_out(self) -> Formatter:
        self.indent -= 1
        return self

    def output(self) -> str:
        """Return the accumulated output, including an unfinished line."""
        lines = list(self.lines)
        if self._current:
            lines.append(self._indent_str * self.indent + "".join(self._current))
        return "\n".join(lines)


def render(e: Expr) -> str:
    """Return the source text of a single expression."""
    return Formatter().expr(e).output()
