"""Errors raised while rendering expression trees."""

from __future__ import annotations


class CodeModelError(Exception):
    """Base for codemodel errors."""


class RenderError(CodeModelError):
    """Object handed to the formatter cannot be rendered."""

    def __init__(self, msg: str, obj: object):
        self.msg: str = msg
        self.obj: object = obj
        super().__init__(msg + ": " + type(obj).__name__)
