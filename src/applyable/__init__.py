"""applyable: apply free functions in method position.

Flat imports (preferred):
    from applyable import apply, to, Apply, applicable

Submodule imports:
    from applyable.pipe import To, to
    from applyable.errors import ApplyConflictError, ImmutableTypeError
"""

from applyable._config import LoggingConfig
from applyable._core import Apply, applicable, apply
from applyable._logging import configure_logging, get_logger
from applyable.errors import ApplyConflictError, ImmutableTypeError
from applyable.pipe import To, to

__all__ = [
    'Apply',
    'ApplyConflictError',
    'ImmutableTypeError',
    'LoggingConfig',
    'To',
    'applicable',
    'apply',
    'configure_logging',
    'get_logger',
    'to',
]
