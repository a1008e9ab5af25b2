"""Kernel error hierarchy.

Hierarchy::

    BaseError                       500, renders itself as JSON
    ├── UnauthorizedError           401 + WWW-Authenticate
    └── ConfigError                 (pipechain.config.errors)
        ├── MissingRequiredSettingError
        └── InvalidSettingValueError
"""

from pipechain.kernel.errors.base import BaseError
from pipechain.kernel.errors.http import UnauthorizedError

__all__ = ["BaseError", "UnauthorizedError"]
