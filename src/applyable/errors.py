"""Errors raised when installing the apply method on a class.

The apply capability itself never raises: exceptions from the applied
function propagate untouched. These errors only come from `applicable`.
"""

from __future__ import annotations

__all__ = ['ApplyConflictError', 'ImmutableTypeError']


class ApplyConflictError(TypeError):
    """Raised when a class already defines an unrelated `apply` attribute."""

    def __init__(self, cls: type, attribute: str = 'apply') -> None:
        self.cls = cls
        self.attribute = attribute
        super().__init__(
            f"'{cls.__qualname__}' already defines '{attribute}'; refusing to replace it"
        )


class ImmutableTypeError(TypeError):
    """Raised when the target class does not accept new attributes (builtins, extension types)."""

    def __init__(self, cls: type) -> None:
        self.cls = cls
        super().__init__(
            f"Cannot install 'apply' on immutable type '{cls.__qualname__}'; "
            'use apply(value, f) or value | to(f) instead'
        )
