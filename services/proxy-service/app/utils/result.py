"""
Result type for operations that can fail without raising
"""

from typing import Generic, TypeVar, Union, cast

T = TypeVar("T")
E = TypeVar("E")

_MISSING = object()


class Result(Generic[T, E]):
    """Either a success value or an error value, never both"""

    __slots__ = ("_value", "_error")

    def __init__(self, value: Union[T, object] = _MISSING, error: Union[E, object] = _MISSING):
        if (value is _MISSING) == (error is _MISSING):
            raise ValueError("Result needs exactly one of value or error")
        self._value = value
        self._error = error

    @classmethod
    def ok(cls, value: T) -> "Result[T, E]":
        return cls(value=value)

    @classmethod
    def err(cls, error: E) -> "Result[T, E]":
        return cls(error=error)

    @property
    def is_ok(self) -> bool:
        return self._error is _MISSING

    @property
    def is_err(self) -> bool:
        return not self.is_ok

    @property
    def value(self) -> T:
        if self.is_err:
            raise ValueError("Called value on Result.err")
        return cast(T, self._value)

    @property
    def error(self) -> E:
        if self.is_ok:
            raise ValueError("Called error on Result.ok")
        return cast(E, self._error)

    def __repr__(self) -> str:
        if self.is_ok:
            return f"Result.ok({self._value!r})"
        return f"Result.err({self._error!r})"
