from __future__ import annotations

from typing import Any


def describe_key(key: Any) -> str:
    """Return a human-readable reference for a dependency key.

    ``None`` renders as ``"None"``, named objects such as classes and functions
    render as their ``__name__``, and everything else falls back to ``str()``.
    A ``__name__`` that is not a string is ignored, so such keys also render
    through ``str()``.
    """
    if key is None:
        return "None"
    name = getattr(key, "__name__", None)
    if isinstance(name, str):
        return name
    return str(key)


class DIConstructError(Exception):
    """Represent a base class for all diconstruct-specific failures.

    Catch this type when you want to handle any diconstruct error path without
    matching each concrete exception class individually.
    """


class DIConstructionError(DIConstructError):
    """Signal that a key could not be constructed.

    Raised by ``Container.construct`` when a provider, a dependency, or the
    key's own constructor fails. The original exception is kept as
    ``__cause__``. Failures deep in a dependency graph are wrapped once per
    level, so walking the ``__cause__`` chain lists every failing key down to
    the root exception.

    Attributes:
        key: The key that was being constructed.
        reference: Human-readable reference to ``key`` used in the message.

    """

    def __init__(self, key: Any) -> None:
        self.key = key
        self.reference = describe_key(key)
        super().__init__(f"Error constructing {self.reference}")


class DIConstructInvalidConfigurationError(DIConstructError):
    """Signal invalid container configuration.

    Raised by ``Container`` when constructor options such as ``lock_mode``
    are not supported values.
    """
