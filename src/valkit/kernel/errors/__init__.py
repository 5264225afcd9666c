"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    ├── LogicError           (logic.py)
    │   └── UnwrapError
    └── ConfigError          (valkit.config.validation)
        ├── MissingRequiredSettingError
        └── InvalidSettingValueError
"""

from valkit.kernel.errors.base import BaseError
from valkit.kernel.errors.logic import LogicError, UnwrapError

__all__ = [
    "BaseError",
    "LogicError",
    "UnwrapError",
]
