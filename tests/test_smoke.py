"""Smoke tests to verify package structure and imports work."""


def test_import_capability():
    """The three application surfaces can be imported."""
    from applyable import Apply, To, applicable, apply, to

    assert apply is not None
    assert to is not None
    assert To is not None
    assert Apply is not None
    assert applicable is not None


def test_import_errors():
    """Errors can be imported and are TypeErrors."""
    from applyable import ApplyConflictError, ImmutableTypeError

    assert issubclass(ApplyConflictError, TypeError)
    assert issubclass(ImmutableTypeError, TypeError)


def test_import_logging():
    """Logging helpers can be imported."""
    from applyable import LoggingConfig, configure_logging, get_logger

    assert LoggingConfig is not None
    assert configure_logging is not None
    assert get_logger is not None


def test_submodule_imports():
    """Submodule imports work."""
    from applyable.errors import ApplyConflictError, ImmutableTypeError  # noqa: F401
    from applyable.pipe import To, to  # noqa: F401

