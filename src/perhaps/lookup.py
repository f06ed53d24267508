from __future__ import annotations

from typing import Any, Callable, Iterable, Mapping, Optional, TypeVar

from loguru import logger

from perhaps.core.maybe import Maybe, absent, present

K = TypeVar("K")
T = TypeVar("T")

_MISSING = object()


def get(mapping: Mapping[K, T], key: K) -> Maybe[T]:
    """Look ``key`` up in ``mapping``; a missing key is absent, a stored ``None`` is present."""
    value = mapping.get(key, _MISSING)
    if value is _MISSING:
        logger.debug("Lookup miss key={key!r}", key=key)
        return absent()
    return present(value)


def get_attr(obj: Any, name: str) -> Maybe[Any]:
    value = getattr(obj, name, _MISSING)
    if value is _MISSING:
        logger.debug(
            "Attribute miss type={type_name} name={name}",
            type_name=type(obj).__name__,
            name=name,
        )
        return absent()
    return present(value)


def first(iterable: Iterable[T], predicate: Optional[Callable[[T], bool]] = None) -> Maybe[T]:
    """
    Return the first item of ``iterable`` (the first satisfying ``predicate``
    when one is given). Consumes the iterable only up to the match.
    """
    for item in iterable:
        if predicate is None or predicate(item):
            return present(item)
    logger.debug("No matching item found")
    return absent()


def parse_int(text: Any, base: int = 10) -> Maybe[int]:
    """Parse text (str or bytes) as an integer; any other input is absent."""
    if not isinstance(text, (str, bytes, bytearray)):
        logger.debug("parse_int rejected non-text {text!r}", text=text)
        return absent()
    try:
        return present(int(text, base))
    except (TypeError, ValueError) as exc:
        logger.debug("parse_int rejected {text!r}: {reason}", text=text, reason=exc)
        return absent()


def parse_float(text: Any) -> Maybe[float]:
    try:
        return present(float(text))
    except (TypeError, ValueError) as exc:
        logger.debug("parse_float rejected {text!r}: {reason}", text=text, reason=exc)
        return absent()
