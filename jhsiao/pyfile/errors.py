"""Errors raised by PythonFile.

Every native failure is surfaced immediately, never retried.  The
errors subclass EnvironmentError so code written against the classic
file object (`except IOError`) still catches them.

FileError
    OpenError: the native layer could not open the path with the
        requested disposition.
    FileIOError: read/write/seek/tell/flush failed after opening.
    StateError: the native layer rejected the operation because the
        handle was already released.
"""
__all__ = [
    'FileError',
    'OpenError',
    'FileIOError',
    'StateError',
    'translate',
]
import contextlib
import io

from jhsiao.pyfile import errnos

class FileError(EnvironmentError):
    """Base class, carries errno, strerror, and filename."""

    @classmethod
    def wrap(cls, exc, filename=None):
        """Create an instance from a native EnvironmentError."""
        if exc.errno is None:
            return cls(errnos.EINVAL, str(exc), filename)
        return cls(exc.errno, exc.strerror, exc.filename or filename)

class OpenError(FileError):
    pass

class FileIOError(FileError):
    pass

class StateError(FileError):
    pass

@contextlib.contextmanager
def translate(errcls, filename=None):
    """Map native exceptions raised inside the block.

    errcls: FileError subclass
        Used for generic native EnvironmentErrors.
    filename: str|None
        Attached to the raised error if the native one has none.

    io.UnsupportedOperation (eg. reading a write-only handle) becomes
    errcls with EBADF.  ValueError for an operation on a closed io
    object and EnvironmentErrors with an errno in errnos.CLOSED become
    StateError.  Anything else passes through unchanged.
    """
    try:
        yield
    except FileError:
        raise
    except io.UnsupportedOperation as e:
        raise errcls(errnos.EBADF, str(e), filename) from e
    except EnvironmentError as e:
        if e.errno in errnos.CLOSED and errcls is not OpenError:
            raise StateError.wrap(e, filename) from e
        raise errcls.wrap(e, filename) from e
    except ValueError as e:
        if 'closed file' in str(e):
            raise StateError(errnos.EBADF, str(e), filename) from e
        raise
