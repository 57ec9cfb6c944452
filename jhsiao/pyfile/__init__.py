"""Classic Python file objects over native file handles.

open() returns a PythonFile whose methods follow the old built-in file
object: read/readline/readlines with byte counts, write that accepts
numbers and bools, seek with whence, and so on.
"""
__all__ = [
    'open',
    'PythonFile',
    'FileError',
    'OpenError',
    'FileIOError',
    'StateError',
]
from jhsiao.pyfile.errors import FileError, OpenError, FileIOError, StateError
from jhsiao.pyfile.pythonfile import PythonFile, open
