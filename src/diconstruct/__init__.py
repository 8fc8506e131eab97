from diconstruct.container import Container
from diconstruct.exceptions import (
    DIConstructError,
    DIConstructInvalidConfigurationError,
    DIConstructionError,
    describe_key,
)
from diconstruct.injectable import Constructible, Injectable, declared_dependencies
from diconstruct.lock_mode import LockMode

__all__ = [
    "Constructible",
    "Container",
    "DIConstructError",
    "DIConstructInvalidConfigurationError",
    "DIConstructionError",
    "Injectable",
    "LockMode",
    "declared_dependencies",
    "describe_key",
]
