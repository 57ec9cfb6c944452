"""Translate classic mode strings into native dispositions.

The native handle is always a binary stream.  Text/binary suffixes are
accepted for compatibility but select the same disposition.
"""
__all__ = ['Disposition', 'MODES', 'DEFAULT_MODE', 'disposition', 'native_buffering']
import collections
import logging

logger = logging.getLogger(__name__)

Disposition = collections.namedtuple(
    'Disposition', ('name', 'native'))

READ = Disposition('read', 'rb')
WRITE = Disposition('write', 'wb')
APPEND = Disposition('append', 'ab')
READWRITE_EXISTING = Disposition('readwrite-existing', 'r+b')
READWRITE = Disposition('readwrite', 'w+b')

DEFAULT_MODE = 'r'

MODES = {
    'r': READ,
    'rb': READ,
    'w': WRITE,
    'wb': WRITE,
    'a': APPEND,
    'ab': APPEND,
    'r+': READWRITE_EXISTING,
    'rb+': READWRITE_EXISTING,
    'r+b': READWRITE_EXISTING,
    'w+': READWRITE,
    'wb+': READWRITE,
    'w+b': READWRITE,
}

def disposition(mode):
    """Return the Disposition for a mode string.

    Unrecognized modes fall back to the read disposition.  This is
    intentional: the classic interface never rejected a mode here.
    """
    try:
        return MODES[mode]
    except (KeyError, TypeError):
        logger.debug('unrecognized mode %r, falling back to %r', mode, DEFAULT_MODE)
        return MODES[DEFAULT_MODE]

def native_buffering(buffering):
    """Convert a buffering hint into an io.open() buffering argument.

    0: unbuffered
    1: line buffered.  Binary streams have no line buffering so use
       the system default instead.
    <0: system default
    >1: approximate buffer size
    """
    if buffering is None or buffering == 1 or buffering < 0:
        return -1
    return buffering
