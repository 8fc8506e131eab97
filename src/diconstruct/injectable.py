from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Constructible(Protocol):
    """Describe a key that ``Container.construct`` can build by default.

    Calling the key with resolved dependencies as positional arguments
    produces the instance. Dependencies are declared by ``dependencies()``,
    in the order the constructor expects them.
    """

    def __call__(self, *args: Any) -> Any: ...

    def dependencies(self) -> Sequence[Any]: ...


class Injectable:
    """Base class for constructible types with explicitly declared dependencies.

    Subclasses override ``dependencies`` to list the keys passed positionally
    to ``__init__``. The default declares none.

    Examples:
        .. code-block:: python

            class Repository(Injectable):
                pass


            class Service(Injectable):
                def __init__(self, repository: Repository) -> None:
                    self.repository = repository

                @classmethod
                def dependencies(cls) -> Sequence[Any]:
                    return (Repository,)

    """

    @classmethod
    def dependencies(cls) -> Sequence[Any]:
        return ()


def declared_dependencies(key: Any) -> Sequence[Any]:
    """Return the dependency keys declared by ``key``.

    Only keys matching ``Constructible`` declare dependencies. Plain classes,
    callables without ``dependencies``, and non-callable keys declare none.
    """
    if not isinstance(key, Constructible):
        return ()
    return tuple(key.dependencies())
