from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import MutableMapping
from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterator, NoReturn, Optional, TypeVar

from .errors import AbsentValueError
from .presence import Presence

T = TypeVar("T")
U = TypeVar("U")

DEFAULT_HOLDER_KEY = "value"


def _assign(holder: Any, key: str, value: Any) -> None:
    if isinstance(holder, MutableMapping):
        holder[key] = value
    else:
        setattr(holder, key, value)


class Maybe(ABC, Generic[T]):
    """
    A value that may or may not be present.

    Sealed: the only variants are ``Just`` (holds a payload) and ``Nothing``
    (holds none). Build instances with ``present(v)`` / ``absent()``.
    """

    __slots__ = ()

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if cls.__module__ != __name__:
            raise TypeError(f"Maybe is sealed; cannot subclass it as '{cls.__qualname__}'")

    @property
    @abstractmethod
    def presence(self) -> Presence:
        ...

    def is_present(self) -> bool:
        return self.presence is Presence.PRESENT

    def is_absent(self) -> bool:
        return not self.is_present()

    is_just = is_present
    is_nothing = is_absent

    @abstractmethod
    def unwrap(self) -> T:
        """Return the payload, or raise AbsentValueError when absent."""
        ...

    def unwrap_checked(self) -> T:
        return self.unwrap()

    @abstractmethod
    def or_else(self, default: T) -> T:
        ...

    @abstractmethod
    def or_else_get(self, factory: Callable[[], T]) -> T:
        ...

    def to_optional(self) -> Optional[T]:
        return self.or_else(None)  # type: ignore[arg-type]

    @abstractmethod
    def extract_into(self, holder: Any, key: str = DEFAULT_HOLDER_KEY) -> bool:
        """
        Write the payload into ``holder`` under ``key`` when present.

        Mappings get item assignment, anything else attribute assignment.
        Returns whether a value was written; an absent optional leaves the
        holder untouched. A holder that rejects the assignment (a frozen
        dataclass, a slotted object without ``key``, a read-only mapping)
        raises whatever that assignment raises.
        """
        ...

    @abstractmethod
    def map(self, fn: Callable[[T], U]) -> Maybe[U]:
        ...

    @abstractmethod
    def and_then(self, fn: Callable[[T], Maybe[U]]) -> Maybe[U]:
        ...

    @abstractmethod
    def filter(self, predicate: Callable[[T], bool]) -> Maybe[T]:
        ...

    def equals(self, other: object) -> bool:
        if not isinstance(other, Maybe):
            return False
        return bool(self == other)

    def not_equals(self, other: object) -> bool:
        return not self.equals(other)

    def __bool__(self) -> bool:
        return self.is_present()


@dataclass(frozen=True, eq=False, repr=False)
class Just(Maybe[T]):
    value: T

    @property
    def presence(self) -> Presence:
        return Presence.PRESENT

    def unwrap(self) -> T:
        return self.value

    def or_else(self, default: T) -> T:
        return self.value

    def or_else_get(self, factory: Callable[[], T]) -> T:
        return self.value

    def extract_into(self, holder: Any, key: str = DEFAULT_HOLDER_KEY) -> bool:
        _assign(holder, key, self.value)
        return True

    def map(self, fn: Callable[[T], U]) -> Maybe[U]:
        return Just(fn(self.value))

    def and_then(self, fn: Callable[[T], Maybe[U]]) -> Maybe[U]:
        result = fn(self.value)
        if not isinstance(result, Maybe):
            raise TypeError(f"and_then callback must return a Maybe, got {type(result).__name__}")
        return result

    def filter(self, predicate: Callable[[T], bool]) -> Maybe[T]:
        return self if predicate(self.value) else Nothing()

    def __iter__(self) -> Iterator[T]:
        yield self.value

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Just):
            return self.value == other.value
        if isinstance(other, Maybe):
            return False
        return NotImplemented

    def __hash__(self) -> int:
        return hash((Presence.PRESENT, self.value))

    def __repr__(self) -> str:
        return f"Just({self.value!r})"


class Nothing(Maybe[Any]):
    """The absent variant. A single shared instance; ``Nothing()`` returns it."""

    __slots__ = ()
    __match_args__ = ()

    _instance: Optional[Nothing] = None

    def __new__(cls) -> Nothing:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __reduce__(self):
        return (Nothing, ())

    @property
    def presence(self) -> Presence:
        return Presence.ABSENT

    def unwrap(self) -> NoReturn:
        raise AbsentValueError()

    def or_else(self, default: T) -> T:
        return default

    def or_else_get(self, factory: Callable[[], T]) -> T:
        return factory()

    def extract_into(self, holder: Any, key: str = DEFAULT_HOLDER_KEY) -> bool:
        return False

    def map(self, fn: Callable[[Any], U]) -> Maybe[U]:
        return self

    def and_then(self, fn: Callable[[Any], Maybe[U]]) -> Maybe[U]:
        return self

    def filter(self, predicate: Callable[[Any], bool]) -> Maybe[Any]:
        return self

    def __iter__(self) -> Iterator[Any]:
        return iter(())

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Maybe):
            return other.is_absent()
        return NotImplemented

    def __hash__(self) -> int:
        return hash(Presence.ABSENT)

    def __repr__(self) -> str:
        return "Nothing"


NOTHING = Nothing()


def present(value: T) -> Maybe[T]:
    return Just(value)


def absent() -> Maybe[Any]:
    return NOTHING


def from_optional(value: Optional[T]) -> Maybe[T]:
    """Lift a nullable value: ``None`` becomes absent, anything else present."""
    return absent() if value is None else present(value)
