import os
import platform

import pytest

from jhsiao.pyfile import platforms

class dummy(object):
    def __init__(self, fd):
        self.fd = fd
    def fileno(self):
        return self.fd

def test_fallback():
    utils = platforms.Utils()
    assert utils.fileno(dummy(5)) == 5
    assert utils.isatty(0) is False
    assert utils.isatty(5) is False

def test_selected():
    if platform.system() == 'Windows':
        assert isinstance(platforms.utils, platforms._WindowsUtils)
    else:
        assert isinstance(platforms.utils, platforms._PosixUtils)

@pytest.mark.skipif(platform.system() == 'Windows', reason='posix only')
def test_posix_regular_file(tmp_path):
    path = tmp_path / 'x'
    path.write_bytes(b'x')
    fd = os.open(str(path), os.O_RDONLY)
    try:
        assert platforms.utils.fileno(dummy(fd)) == fd
        assert not platforms.utils.isatty(fd)
    finally:
        os.close(fd)

@pytest.mark.skipif(platform.system() == 'Windows', reason='posix only')
def test_posix_pipe():
    r, w = os.pipe()
    try:
        assert not platforms.utils.isatty(r)
        assert not platforms.utils.isatty(w)
    finally:
        os.close(r)
        os.close(w)

def test_setattrs():
    def func():
        pass
    assert platforms.setattrs(func, restype=int, argtypes=()) is func
    assert func.restype is int
    assert func.argtypes == ()
