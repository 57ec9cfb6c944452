"""Define relevant errno."""
__all__ = ['EBADF', 'EINVAL', 'ENOENT', 'CLOSED']
import platform
try:
    import errno
except ImportError:
    EBADF = 9
    ENOENT = 2
    EINVAL = 22
else:
    EBADF = getattr(errno, 'EBADF', 9)
    ENOENT = getattr(errno, 'ENOENT', 2)
    EINVAL = getattr(errno, 'EINVAL', 22)

# Errnos a native layer may report for an already-released handle.
# WSAENOTSOCK shows up instead of EBADF for some Windows handles.
CLOSED = set([EBADF, 10038]) if platform.system() == 'Windows' else set([EBADF])
