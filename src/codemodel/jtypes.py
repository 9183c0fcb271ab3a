"""Java type references used by the expression factory.

Only what expression construction needs: naming a type, parameterizing a
class, and erasing type arguments. Generic bounds checking, inheritance and
imports live elsewhere.

| Class         | Renders as            | erasure()             |
|---------------|-----------------------|-----------------------|
| PrimitiveType | int                   | itself                |
| ClassRef      | java.util.List        | itself                |
| NarrowedClass | java.util.List<T>     | basis                 |
| ArrayType     | T[]                   | ArrayType(T.erasure)  |
| TypeVar       | T                     | bound, or Object      |
"""

from __future__ import annotations

from dataclasses import dataclass

PRIMITIVE_NAMES = frozenset(
    {
        "boolean",
        "byte",
        "char",
        "short",
        "int",
        "long",
        "float",
        "double",
        "void",
    }
)


@dataclass(unsafe_hash=True)
class JType:
    """Base for all types. Abstract."""

    def erasure(self) -> JType:
        """Return this type with all type arguments removed."""
        return self


@dataclass(unsafe_hash=True)
class PrimitiveType(JType):
    """int, boolean, void, ...

    Invariants:
    - name is in PRIMITIVE_NAMES
    """

    name: str


@dataclass(unsafe_hash=True)
class ClassRef(JType):
    """Reference to a class or interface by name."""

    name: str
    package: str = ""

    def fullname(self) -> str:
        if self.package:
            return self.package + "." + self.name
        return self.name


@dataclass(unsafe_hash=True)
class NarrowedClass(JType):
    """Parameterized class: List<String>.

    Invariants:
    - basis is never itself narrowed
    - len(type_args) >= 1
    """

    basis: ClassRef
    type_args: tuple[JType, ...]

    def erasure(self) -> JType:
        return self.basis


@dataclass(unsafe_hash=True)
class ArrayType(JType):
    """Array of component: T[]."""

    component: JType

    def erasure(self) -> JType:
        return ArrayType(self.component.erasure())


@dataclass(unsafe_hash=True)
class TypeVar(JType):
    """Type variable: T, or T extends Bound."""

    name: str
    bound: JType | None = None

    def erasure(self) -> JType:
        if self.bound is None:
            return OBJECT
        return self.bound.erasure()


BOOLEAN = PrimitiveType("boolean")
BYTE = PrimitiveType("byte")
CHAR = PrimitiveType("char")
SHORT = PrimitiveType("short")
INT = PrimitiveType("int")
LONG = PrimitiveType("long")
FLOAT = PrimitiveType("float")
DOUBLE = PrimitiveType("double")
VOID = PrimitiveType("void")

OBJECT = ClassRef("Object", "java.lang")
STRING = ClassRef("String", "java.lang")


def narrow(basis: ClassRef, *type_args: JType) -> NarrowedClass:
    """Parameterize basis with type_args: narrow(LIST, STRING) is List<String>."""
    return NarrowedClass(basis, tuple(type_args))


def is_narrowed(typ: JType) -> bool:
    """True if typ carries type arguments at its top level."""
    return isinstance(typ, NarrowedClass)
