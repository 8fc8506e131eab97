from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from contextlib import AbstractContextManager, nullcontext
from typing import TYPE_CHECKING, Any, TypeVar, overload

if TYPE_CHECKING:
    from typing_extensions import Self

from diconstruct.exceptions import DIConstructInvalidConfigurationError, DIConstructionError
from diconstruct.injectable import declared_dependencies
from diconstruct.lock_mode import LockMode

T = TypeVar("T")

logger = logging.getLogger(__name__)


class Container:
    """Construct values on demand and cache them as per-container singletons.

    Keys are usually classes, but any hashable value works: strings,
    sentinel objects, or ``None``. ``construct`` resolves a key in priority
    order: an already cached value, then a registered provider, then default
    construction from the key's declared dependencies. Every produced value is
    cached, so each key is built at most once per container.

    Cyclic dependency graphs are not detected and recurse until Python raises
    ``RecursionError``, which is then wrapped like any other failure.

    Examples:
        .. code-block:: python

            container = Container()
            container.provide(Settings, lambda: Settings.from_env())

            service = container.construct(Service)
            assert container.construct(Service) is service

    """

    def __init__(self, *, lock_mode: LockMode = LockMode.NONE) -> None:
        """Initialize an empty container.

        Args:
            lock_mode: ``LockMode.NONE`` leaves the container unguarded for
                single-threaded use. ``LockMode.THREAD`` serializes
                construction and registration so each key is built at most
                once under concurrent access.

        Raises:
            DIConstructInvalidConfigurationError: If ``lock_mode`` is not a
                ``LockMode`` member.

        """
        if not isinstance(lock_mode, LockMode):
            msg = f"Container() parameter 'lock_mode' must be a LockMode, got {lock_mode!r}."
            raise DIConstructInvalidConfigurationError(msg)

        self._lock_mode = lock_mode
        self._instances: dict[Any, Any] = {}
        self._providers: dict[Any, Callable[[], Any]] = {}
        self._lock: threading.RLock | None = (
            threading.RLock() if lock_mode is LockMode.THREAD else None
        )

    @property
    def lock_mode(self) -> LockMode:
        return self._lock_mode

    def register(self, key: Any, value: Any) -> Self:
        """Register an already built value under ``key``.

        Overwrites any cached value for the key. Later ``construct(key)``
        calls return ``value`` without running providers or constructors.

        Args:
            key: Key to bind, usually the class the value stands in for.
            value: Value to return on construction.

        Returns:
            The container, for chaining.

        """
        with self._guard():
            self._instances[key] = value
        return self

    def provide(self, key: Any, provider: Callable[[], Any]) -> Self:
        """Register a zero-argument provider that overrides default construction.

        The provider is called lazily, at most once, on the first
        ``construct(key)`` that misses the cache. Its result is cached like a
        default-constructed instance.

        Args:
            key: Key to bind.
            provider: Callable invoked with no arguments.

        Returns:
            The container, for chaining.

        """
        with self._guard():
            self._providers[key] = provider
        return self

    @overload
    def construct(self, key: type[T]) -> T: ...

    @overload
    def construct(self, key: Any) -> Any: ...

    def construct(self, key: Any) -> Any:
        """Return the value for ``key``, building it and its dependencies on demand.

        Args:
            key: Key to resolve. Default construction calls
                ``key(*dependencies)`` where ``dependencies`` are the values of
                the keys listed by ``key.dependencies()``, in order.

        Returns:
            The cached, provided, or newly constructed value.

        Raises:
            DIConstructionError: If anything fails while resolving ``key``.
                The original exception is chained as ``__cause__``.

        """
        with self._guard():
            try:
                if key in self._instances:
                    return self._instances[key]
                if key in self._providers:
                    return self._construct_via_provider(key)
                return self._construct_via_dependencies(key)
            except Exception as error:
                logger.debug("Wrapping failure while constructing %r: %r", key, error)
                raise DIConstructionError(key) from error

    def __contains__(self, key: Any) -> bool:
        return key in self._instances

    def _construct_via_provider(self, key: Any) -> Any:
        logger.debug("Constructing %r via registered provider", key)
        instance = self._providers[key]()
        self._instances[key] = instance
        return instance

    def _construct_via_dependencies(self, key: Any) -> Any:
        dependencies = [self.construct(dependency) for dependency in declared_dependencies(key)]
        logger.debug("Constructing %r with %d dependencies", key, len(dependencies))
        instance = key(*dependencies)
        self._instances[key] = instance
        return instance

    def _guard(self) -> AbstractContextManager[Any]:
        if self._lock is None:
            return nullcontext()
        return self._lock
