"""Apply functions in method position.

Much of Python's functionality lives in methods, but some of it only exists
as free functions or constructors (`json.loads`, `Path`, `Decimal`, a
`Result` variant). Calling those in the middle of a chain forces either
nesting or a throwaway name:

    resp = make_request(req)
    resp = decode(resp)
    resp = Ok(resp)

`apply` threads a value into a single-argument function without either:

    make_request(req).apply(decode).apply(Ok)     # classes using Apply
    make_request(req) | to(decode) | to(Ok)       # any value
    apply(apply(make_request(req), decode), Ok)   # prefix form

All three forms are exactly `f(value)`: nothing is wrapped, validated,
logged or caught on the way.
"""

from __future__ import annotations

import inspect
from collections.abc import Callable
from typing import Self

from applyable._logging import get_logger
from applyable.errors import ApplyConflictError, ImmutableTypeError

__all__ = ['Apply', 'applicable', 'apply']

_MISSING = object()


def apply[T, R](value: T, f: Callable[[T], R], /) -> R:
    """Call `f` with `value` as its only argument.

    Args:
        value: Any value.
        f: A callable accepting `value`.

    Returns:
        Whatever `f(value)` returns, unchanged.

    Example:
        ```python
        apply(5, str)
        # '5'
        apply(apply(b'{"id": 1}', json.loads), Ok)
        # Ok(value={'id': 1})
        ```
    """
    return f(value)


class Apply:
    """Mixin giving instances an `apply` method.

    Example:
        ```python
        class User(Apply):
            ...

        fetch_user().apply(SharedRef).apply(Ok)
        ```
    """

    __slots__ = ()

    def apply[R](self, f: Callable[[Self], R], /) -> R:
        """Apply a given function in method position."""
        return f(self)


def applicable[C: type](cls: C) -> C:
    """Class decorator installing `Apply.apply` on an existing class.

    Use it for classes that cannot (or should not) take `Apply` as a base,
    e.g. dataclasses or third-party classes patched at import time. The class
    object is returned as is.

    Raises:
        TypeError: If `cls` is not a class.
        ApplyConflictError: If `cls` already has a different `apply` attribute.
        ImmutableTypeError: If `cls` rejects new attributes (e.g. `int`).
    """
    if not isinstance(cls, type):
        raise TypeError(f'applicable() expects a class, got {type(cls).__name__!r}')

    existing = inspect.getattr_static(cls, 'apply', _MISSING)
    if existing is Apply.apply:
        return cls
    if existing is not _MISSING:
        raise ApplyConflictError(cls)

    try:
        setattr(cls, 'apply', Apply.apply)
    except TypeError as exc:
        raise ImmutableTypeError(cls) from exc

    get_logger(__name__).debug('apply_installed', cls=f'{cls.__module__}.{cls.__qualname__}')
    return cls
