"""Tests for type references and erasure."""

from codemodel.jtypes import (
    INT,
    OBJECT,
    STRING,
    ArrayType,
    ClassRef,
    NarrowedClass,
    PrimitiveType,
    TypeVar,
    is_narrowed,
    narrow,
)


def test_fullname():
    assert ClassRef("List", "java.util").fullname() == "java.util.List"
    assert ClassRef("Local").fullname() == "Local"


def test_non_generic_erasure_is_identity(list_class):
    assert INT.erasure() is INT
    assert list_class.erasure() is list_class


def test_narrowed_erasure_is_basis(list_class):
    typ = narrow(list_class, STRING)
    assert typ == NarrowedClass(list_class, (STRING,))
    assert typ.erasure() == list_class


def test_array_erasure(list_class):
    typ = ArrayType(ArrayType(narrow(list_class, STRING)))
    assert typ.erasure() == ArrayType(ArrayType(list_class))


def test_type_var_erasure():
    assert TypeVar("T").erasure() == OBJECT
    number = ClassRef("Number", "java.lang")
    assert TypeVar("N", number).erasure() == number


def test_type_var_erasure_through_generic_bound(list_class):
    assert TypeVar("L", narrow(list_class, STRING)).erasure() == list_class


def test_is_narrowed(list_class):
    assert is_narrowed(narrow(list_class, STRING))
    assert not is_narrowed(list_class)
    assert not is_narrowed(ArrayType(narrow(list_class, STRING)))
    assert not is_narrowed(PrimitiveType("int"))


def test_types_are_hashable(list_class):
    seen = {narrow(list_class, STRING), narrow(list_class, STRING), INT}
    assert len(seen) == 2
