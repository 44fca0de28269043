__version__ = "0.1.0"

from .base import CleanupResult
from .formatting import format_size
from .pruner import RepositoryPruner


__all__ = [
    "CleanupResult",
    "RepositoryPruner",
    "format_size",
    "__version__",
]
