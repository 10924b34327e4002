"""tablestore package initialization.

Single source of truth for the package version so that code, tests, and
scripts can import without duplicating literals.
"""

PACKAGE_VERSION = "0.1.0"  # Keep in sync with pyproject version.

from .errors import StoreError, InvalidArgument, NotFound  # noqa: E402
from .config import StoreConfig  # noqa: E402
from .store import Store, Collection  # noqa: E402

__all__ = [
    "PACKAGE_VERSION",
    "Store", "Collection", "StoreConfig",
    "StoreError", "InvalidArgument", "NotFound",
]
