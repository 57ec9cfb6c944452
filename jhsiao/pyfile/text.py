"""Convert values to file content.

Content is exposed as str with exactly 1 character per byte (latin-1)
so byte counts and character counts always agree.  A str holding a
character outside latin-1 has no such representation and is rejected
with ValueError.
"""
__all__ = ['CHARSET', 'CTYPES_SCALARS', 'tobytes', 'totext', 'represent']
import ctypes
from numbers import Integral, Real

CHARSET = 'latin-1'

# Unwrapped via .value before conversion.  c_char_p is handled apart.
CTYPES_SCALARS = (
    ctypes.c_char,
    ctypes.c_wchar,
    ctypes.c_wchar_p,
    ctypes.c_bool,
    ctypes.c_byte,
    ctypes.c_ubyte,
    ctypes.c_short,
    ctypes.c_ushort,
    ctypes.c_int,
    ctypes.c_uint,
    ctypes.c_long,
    ctypes.c_ulong,
    ctypes.c_longlong,
    ctypes.c_ulonglong,
    ctypes.c_size_t,
    ctypes.c_ssize_t,
    ctypes.c_float,
    ctypes.c_double,
    ctypes.c_longdouble,
)

def totext(data):
    """Decode native bytes into content text."""
    return data.decode(CHARSET)

def tobytes(text):
    """Encode content text into native bytes.

    Raise ValueError if text has a character above U+00FF.
    """
    try:
        return text.encode(CHARSET)
    except UnicodeEncodeError as e:
        raise ValueError(
            'character {!r} at index {} does not fit in 1 byte ({}); '
            'write encoded bytes instead'.format(
                e.object[e.start], e.start, CHARSET)) from e

def represent(value):
    """Return the bytes that write(value) puts in the file.

    str: the text itself (a single character is just a short str),
        ValueError if not representable in latin-1
    bytes-like: written as-is
    ctypes.c_char_p: null-terminated byte string, NULL writes nothing
    other ctypes scalars (CTYPES_SCALARS): unwrapped via .value first
    bool: b'true' or b'false'
    Integral: decimal text
    Real: repr of the value as a float (covers 32-bit floats)
    """
    if isinstance(value, ctypes.c_char_p):
        return value.value or b''
    if isinstance(value, CTYPES_SCALARS):
        value = value.value
        if value is None:
            return b''
    if isinstance(value, str):
        return tobytes(value)
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value)
    if isinstance(value, bool):
        return b'true' if value else b'false'
    if isinstance(value, Integral):
        return tobytes(str(int(value)))
    if isinstance(value, Real):
        return tobytes(repr(float(value)))
    raise TypeError(
        'write() argument must be str, bytes, bool, or a number, not {}'.format(
            type(value).__name__))
