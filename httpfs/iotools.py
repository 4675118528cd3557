import io
from functools import wraps

from httpfs.errors import UnsupportedError


def check_read_mode(mode):
    """Raise UnsupportedError if `mode` would need write access"""
    if set(mode) & set('wax+'):
        raise UnsupportedError('write')


def readable_to_stream(f):
    """Decorator for ``open`` methods that return a binary file-like object.

    The mode is checked before the wrapped method is called, and the object
    it returns is converted in to a text or binary stream to match the mode.

    """
    @wraps(f)
    def wrapper(self, path, mode='r', encoding=None, errors=None, newline=None, line_buffering=False, **kwargs):
        check_read_mode(mode)
        file_like = f(self, path, mode=mode, **kwargs)
        return make_stream(file_like,
                           mode=mode,
                           encoding=encoding,
                           errors=errors,
                           newline=newline,
                           line_buffering=line_buffering)
    return wrapper


def make_stream(f,
                mode='r',
                encoding=None,
                errors=None,
                newline=None,
                line_buffering=False):
    """Take a binary file-like object opened for reading and return an IO stream"""
    if 'b' in mode:
        return f
    return io.TextIOWrapper(f,
                            encoding=encoding or 'utf-8',
                            errors=errors,
                            newline=newline,
                            line_buffering=line_buffering)


def decode_binary(data, encoding=None, errors=None, newline=None):
    """Decode bytes as though read from a text file"""
    return io.TextIOWrapper(io.BytesIO(data), encoding=encoding or 'utf-8', errors=errors, newline=newline).read()
