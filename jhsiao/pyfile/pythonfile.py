"""A file object with the classic Python file interface.

PythonFile wraps a native binary stream and exposes the old built-in
file methods with their old calling conventions:

    # Read and print one line, then the next ten bytes.
    f = open('my_file.txt', 'r')
    print(f.readline())
    s = f.read(10)
    f.close()

    # Write "Hello World!", then several strings at once.
    f = open('my_file.txt', 'w')
    f.write('Hello World!')
    f.writelines(['This', 'is', 'an', 'example'])
    f.close()

    # Read and write at several locations.
    f = open('my_file.txt', 'r+')
    f.seek(10)
    print(f.read())
    print(f.tell())
    f.seek(-50, 2)
    f.write('Inserted at pos 50 from end')
    f.close()

Differences from the classic object:
    encoding and newlines exist but are always None.
    fileno() returns the platform handle, which is only a file
        descriptor on POSIX.
    Operations after close() are not checked here.  The native layer
        rejects them and that surfaces as errors.StateError.

Instances are not threadsafe.  Callers sharing one across threads must
serialize access themselves.
"""
__all__ = ['PythonFile', 'open']
import io
import logging

from jhsiao.pyfile import errors, modes, platforms, text

logger = logging.getLogger(__name__)

SEEK_SET = 0
SEEK_CUR = 1
SEEK_END = 2

class PythonFile(object):
    def __init__(self, name, mode=modes.DEFAULT_MODE, buffering=-1):
        """Open name.

        name: str
            The path to open.
        mode: str
            r, w, a, r+, w+ optionally with b (rb, wb, ab, rb+, wb+).
            Anything else is treated as r.
        buffering: int
            0: unbuffered, 1: line buffered, <0: system default,
            otherwise the approximate buffer size.  Only a hint, it
            never changes what reads and writes return.
        """
        disp = modes.disposition(mode)
        with errors.translate(errors.OpenError, name):
            self.handle = io.open(
                name, disp.native, modes.native_buffering(buffering))
        self.mode = mode
        self.name = name
        self.closed = False
        self.softspace = False
        self.encoding = None
        self.newlines = None
        logger.debug('opened %r as %s (mode %r)', name, disp.name, mode)

    def __repr__(self):
        return '<{} file {!r}, mode {!r} at {:#x}>'.format(
            'closed' if self.closed else 'open', self.name, self.mode, id(self))

    def __enter__(self):
        return self
    def __exit__(self, tp, exc, tb):
        if not self.closed:
            self.close()

    def __iter__(self):
        return self

    def __next__(self):
        line = self.readline()
        if not line:
            raise StopIteration
        return line
    next = __next__

    def xreadlines(self):
        return self

    def _translate(self, errcls=errors.FileIOError):
        return errors.translate(errcls, self.name)

    def close(self):
        """Release the native handle.

        Call at most once.  Calling again is up to the native layer.
        """
        with self._translate():
            self.handle.close()
        self.closed = True
        logger.debug('closed %r', self.name)

    def flush(self):
        """Push buffered writes to the OS.  Nothing to do for readers."""
        with self._translate():
            self.handle.flush()

    def fileno(self):
        """Return the platform handle.

        Only a file descriptor on POSIX.  Treat it as opaque elsewhere.
        """
        with self._translate():
            return platforms.utils.fileno(self.handle)

    def isatty(self):
        native = self.fileno()
        with self._translate():
            return platforms.utils.isatty(native)

    def tell(self):
        with self._translate():
            return self.handle.tell()

    def seek(self, offset, whence=SEEK_SET):
        """Move to a new position.

        whence:
            0: offset from the start
            1: offset from tell()
            2: offset from the end (size of file)
            anything else: same as 0
        The target is not validated before the native seek.  If the
        native seek fails, the position is left where it was.
        """
        if whence == SEEK_CUR:
            target = self.tell() + offset
        elif whence == SEEK_END:
            # Finding the size moves the handle, so restore on failure.
            start = self.tell()
            with self._translate():
                target = self.handle.seek(0, io.SEEK_END) + offset
                try:
                    self.handle.seek(target, io.SEEK_SET)
                except Exception:
                    self.handle.seek(start, io.SEEK_SET)
                    raise
            return
        else:
            if whence != SEEK_SET:
                logger.debug('unrecognized whence %r, seeking absolute', whence)
            target = offset
        with self._translate():
            self.handle.seek(target, io.SEEK_SET)

    def write(self, value):
        """Write value without any trailing separator.

        value can be str, bytes, bool, an int or float, or a ctypes
        scalar (c_char_p is treated as a null-terminated string).
        See text.represent() for the exact text.

        Content is 1 byte per character (latin-1).  A str holding a
        character above U+00FF raises ValueError and writes nothing.
        Encode such text first and write the bytes instead.
        """
        data = text.represent(value)
        with self._translate():
            self.handle.write(data)

    def writelines(self, lines):
        """Write each item in order with nothing in between.

        Items written before a failure stay written.
        """
        for line in lines:
            self.write(line)

    def read(self, count=-1):
        """Read count bytes, or until EOF if count is omitted or < 0.

        Returns less than count (possibly '') at EOF.
        """
        if count == 0:
            return ''
        with self._translate():
            if count is None or count < 0:
                data = self.handle.read()
            else:
                data = self.handle.read(count)
        return text.totext(data or b'')

    def _rewind(self, amount):
        """Push back amount already read bytes."""
        if amount:
            self.seek(-amount, SEEK_CUR)

    def readline(self, count=-1):
        """Read a line including its trailing newline.

        The last line of a file lacking a final newline is returned
        without one.  If count >= 0 and the line is longer, return only
        count characters and rewind so the next read continues right
        after them.  None or a negative count means no cap.
        """
        with self._translate():
            line = text.totext(self.handle.readline())
        if count is not None and 0 <= count < len(line):
            self._rewind(len(line) - count)
            line = line[:count]
        return line

    def readlines(self, count=0):
        """Read lines until EOF.

        If count > 0 (not None), stop once count characters were read.  The line
        that crosses count is cut to fill the budget exactly, its tail
        is rewound, and it is the last line returned.
        """
        lines = []
        total = 0
        while True:
            line = self.readline()
            if not line:
                return lines
            if count is None or count <= 0:
                lines.append(line)
                continue
            total += len(line)
            if total > count:
                keep = len(line) - (total - count)
                self._rewind(len(line) - keep)
                line = line[:keep]
            lines.append(line)
            if total >= count:
                return lines

def open(name, mode=modes.DEFAULT_MODE, buffering=-1):
    """Open a file and return a PythonFile.

    Raise errors.OpenError if the native layer cannot open name with
    the disposition for mode.
    """
    return PythonFile(name, mode, buffering)
