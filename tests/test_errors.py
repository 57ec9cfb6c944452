import errno
import io

import pytest

from jhsiao.pyfile import errnos, errors

def test_hierarchy():
    for cls in (errors.OpenError, errors.FileIOError, errors.StateError):
        assert issubclass(cls, errors.FileError)
        assert issubclass(cls, EnvironmentError)

def test_translate_environment_error():
    with pytest.raises(errors.FileIOError) as info:
        with errors.translate(errors.FileIOError, 'name'):
            raise OSError(errno.EIO, 'Input/output error')
    assert info.value.errno == errno.EIO
    assert info.value.strerror == 'Input/output error'
    assert info.value.filename == 'name'
    assert isinstance(info.value.__cause__, OSError)

def test_translate_keeps_native_filename():
    with pytest.raises(errors.OpenError) as info:
        with errors.translate(errors.OpenError, 'given'):
            raise FileNotFoundError(errno.ENOENT, 'No such file', 'native')
    assert info.value.errno == errnos.ENOENT
    assert info.value.filename == 'native'

def test_translate_unsupported():
    with pytest.raises(errors.FileIOError) as info:
        with errors.translate(errors.FileIOError):
            raise io.UnsupportedOperation('read')
    assert info.value.errno == errnos.EBADF

def test_translate_closed():
    with pytest.raises(errors.StateError) as info:
        with errors.translate(errors.FileIOError, 'f'):
            raise ValueError('I/O operation on closed file.')
    assert info.value.errno == errnos.EBADF

    with pytest.raises(errors.StateError):
        with errors.translate(errors.FileIOError):
            raise OSError(errnos.EBADF, 'Bad file descriptor')

    # a bad descriptor while opening is still an open failure
    with pytest.raises(errors.OpenError):
        with errors.translate(errors.OpenError):
            raise OSError(errnos.EBADF, 'Bad file descriptor')

def test_translate_passthrough():
    with pytest.raises(ValueError) as info:
        with errors.translate(errors.FileIOError):
            raise ValueError('negative seek position')
    assert not isinstance(info.value, errors.FileError)

    with pytest.raises(errors.StateError):
        with errors.translate(errors.FileIOError):
            raise errors.StateError(errnos.EBADF, 'already mapped')

    with pytest.raises(KeyError):
        with errors.translate(errors.FileIOError):
            raise KeyError('x')

def test_translate_no_errno():
    with pytest.raises(errors.FileIOError) as info:
        with errors.translate(errors.FileIOError, 'n'):
            raise OSError('no errno here')
    assert info.value.errno == errnos.EINVAL
