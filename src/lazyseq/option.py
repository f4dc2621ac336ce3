"""
Optional results for terminal operations that may find nothing.
"""

from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar

from lazyseq.errors import EmptySequenceError, require_callable

T = TypeVar('T')
U = TypeVar('U')

_ABSENT = object()


@dataclass(frozen=True)
class Option(Generic[T]):
    """
    Either a present value or nothing.

    Unlike ``Optional[T]`` a present value may itself be ``None``, so
    ``seq([None]).first_optional()`` and ``empty().first_optional()`` can
    be told apart.
    """

    _value: Any = _ABSENT

    @classmethod
    def of(cls, value: T) -> 'Option[T]':
        """Create a present option."""
        return cls(value)

    @classmethod
    def empty(cls) -> 'Option[T]':
        """Create an empty option."""
        return cls()

    @property
    def is_present(self) -> bool:
        return self._value is not _ABSENT

    @property
    def is_empty(self) -> bool:
        return self._value is _ABSENT

    def get(self) -> T:
        """Return the value or raise EmptySequenceError."""
        if self._value is _ABSENT:
            raise EmptySequenceError("No value present")
        return self._value

    def or_else(self, default: T) -> T:
        return default if self._value is _ABSENT else self._value

    def map(self, func: Callable[[T], U]) -> 'Option[U]':
        """Apply func to a present value."""
        require_callable(func, "func")
        if self._value is _ABSENT:
            return Option()
        return Option(func(self._value))

    def __bool__(self) -> bool:
        return self.is_present

    def __repr__(self) -> str:
        if self._value is _ABSENT:
            return "Option.empty()"
        return f"Option.of({self._value!r})"
