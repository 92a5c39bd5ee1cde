"""Error augmentation helpers.

Attach path facts to OSErrors raised by filesystem operations, so the
message explains the state of the path instead of only naming it.

Example:
    >>> with explain_os_errors():
    ...     Path("/srv/app/missing/config.toml").read_text()
    Traceback (most recent call last):
    pathfacts.core.errors.PathOperationError: [Errno 2] No such file or directory: cannot access ...
"""

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from pathfacts.core.facts import PathFacts, PathInput


class PathOperationError(OSError):
    """OSError whose message carries the facts about the failing path.

    The errno, filename, and filename2 of the original error are kept,
    so ``except FileNotFoundError``-style handling by errno still works
    via ``error.errno``.

    Attributes:
        original: The OSError that was raised by the operation.
        facts: Facts about the path at the time the error was handled.
    """

    def __init__(self, original: OSError, facts: PathFacts) -> None:
        message = f"{original.strerror or original}: {facts}"
        if original.errno is None:
            super().__init__(message)
        else:
            super().__init__(original.errno, message, original.filename, None, original.filename2)
        self.original = original
        self.facts = facts


def describe_os_error(error: OSError, path: PathInput | None = None, **kwargs: Any) -> str:
    """Describe a failed operation as ``"<reason>: <facts>"``.

    Args:
        error: The OSError raised by the operation.
        path: Path to inspect. Defaults to ``error.filename``.
        **kwargs: Passed through to PathFacts (filesystem, settings, cwd).

    Returns:
        Error reason followed by the rendered facts, or ``str(error)``
        when there is no path to inspect.
    """
    target = path if path is not None else error.filename
    if target is None:
        return str(error)
    return f"{error.strerror or error}: {PathFacts(target, **kwargs)}"


@contextmanager
def explain_os_errors(path: PathInput | None = None, **kwargs: Any) -> Iterator[None]:
    """Re-raise OSErrors from the body as PathOperationError.

    Args:
        path: Path to inspect. Defaults to the error's ``filename``.
        **kwargs: Passed through to PathFacts (filesystem, settings, cwd).

    Raises:
        PathOperationError: For any OSError with a path to inspect.
        OSError: Re-raised untouched when there is no path to inspect.
    """
    try:
        yield
    except PathOperationError:
        raise
    except OSError as e:
        target = path if path is not None else e.filename
        if target is None:
            raise
        raise PathOperationError(e, PathFacts(target, **kwargs)) from e
