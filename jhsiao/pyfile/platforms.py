"""Platform specific handle queries.

fileno() returns whatever the platform considers the native handle:
    POSIX: the file descriptor.
    Windows: the OS HANDLE behind the C runtime descriptor.  This is
        NOT a file descriptor and cannot be passed to os.read() etc.

isatty() asks the platform whether that handle is an interactive
terminal.  Platforms without such a query always answer False.
"""
__all__ = ['Utils', 'utils']
import ctypes
import os
import platform

def setattrs(func, **kwargs):
    """Set attrs of func and return it.

    Useful for setting values for ctypes functions.
    """
    for k, v in kwargs.items():
        setattr(func, k, v)
    return func

class Utils(object):
    """Fallback: no native terminal query."""
    def fileno(self, handle):
        """Return the native handle of an io stream.

        handle: the io object opened by PythonFile.
        """
        return handle.fileno()

    def isatty(self, native):
        """Whether native (a fileno() result) is a terminal."""
        return False

class _PosixUtils(Utils):
    def isatty(self, native):
        return os.isatty(native)

class _WindowsUtils(Utils):
    FILE_TYPE_CHAR = 0x0002
    FILE_TYPE_UNKNOWN = 0x0000
    NO_ERROR = 0

    def __init__(self):
        import msvcrt
        from ctypes import wintypes
        self.get_osfhandle = msvcrt.get_osfhandle
        self.k32 = ctypes.WinDLL('kernel32', use_last_error=True)

        # DWORD GetFileType(
        #   [in] HANDLE hFile
        # );
        self.GetFileType = setattrs(
            self.k32.GetFileType,
            restype=wintypes.DWORD,
            argtypes=(wintypes.HANDLE,))

    def fileno(self, handle):
        return self.get_osfhandle(handle.fileno())

    def isatty(self, native):
        tp = self.GetFileType(native)
        if tp == self.FILE_TYPE_UNKNOWN:
            eno = ctypes.get_last_error()
            if eno != self.NO_ERROR:
                raise ctypes.WinError(eno)
        return tp == self.FILE_TYPE_CHAR

if platform.system() == 'Windows':
    utils = _WindowsUtils()
elif hasattr(os, 'isatty'):
    utils = _PosixUtils()
else:
    utils = Utils()
