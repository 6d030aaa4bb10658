"""Postfix application through the `|` operator.

`value | to(f)` is `f(value)` for any value whose own `__or__` does not
accept the right operand. Builtins (int, str, set, dict, ...) and array
libraries honoring `__array_ufunc__ = None` all defer to `To.__ror__`.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import wrapt

__all__ = ['To', 'to']


class To[T, R](wrapt.CallableObjectProxy):
    """Callable proxy around a single-argument function.

    Behaves like the wrapped function (calling, attribute access, equality)
    and additionally applies it when it appears on the right of `|`.

    Example:
        ```python
        b'{"id": 1}' | to(json.loads) | to(Ok)
        # Ok(value={'id': 1})
        ```
    """

    # numpy and friends return NotImplemented from `|` instead of broadcasting
    __array_ufunc__ = None

    def __init__(self, f: Callable[[T], R]) -> None:
        super().__init__(f)

    def __ror__(self, value: T) -> R:
        return self.__wrapped__(value)

    def __or__(self, other: Any) -> Any:
        # no composition: `to(f) | to(g)` is a TypeError like any unsupported operand
        return NotImplemented

    def __repr__(self) -> str:
        return f'to({self.__wrapped__!r})'


def to[T, R](f: Callable[[T], R]) -> To[T, R]:
    """Wrap `f` for use on the right of `|`.

    Args:
        f: A callable accepting one argument.

    Returns:
        A `To` proxy; `value | to(f)` evaluates to `f(value)`.

    Example:
        ```python
        5 | to(str)
        # '5'
        'hello' | to(len)
        # 5
        ```
    """
    return To(f)
