"""pathfacts - explain why a filesystem operation on a path failed.

Inspects the ancestor chain of a path and renders the facts (what exists,
what type it is, which permissions are granted) at inspection time.
"""

from pathfacts.core.errors import PathOperationError, describe_os_error, explain_os_errors
from pathfacts.core.facts import PathFacts, inspect_path

__version__ = "0.1.0"

__all__ = [
    "PathFacts",
    "PathOperationError",
    "__version__",
    "describe_os_error",
    "explain_os_errors",
    "inspect_path",
]
