"""Declaration handles that expressions can point at.

The factory reads a handle's name when the expression is built, so a handle
renamed afterwards does not change expressions that already exist.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from .jtypes import VOID, JType


@dataclass
class Var:
    """Field, local variable or parameter declaration."""

    name: str
    typ: JType | None = None


@dataclass
class Method:
    """Method declaration: only what call sites need."""

    name: str
    ret: JType = VOID
    params: list[Var] = field(default_factory=list)

    def param(self, typ: JType, name: str) -> Var:
        """Declare a new parameter and return its handle."""
        v = Var(name, typ)
        self.params.append(v)
        return v
