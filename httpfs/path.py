"""
httpfs.path
===========

Useful functions for HTTPFS path manipulation.

Paths are forward slash separated strings, relative to the base URL of an
HTTPFS object. Unlike ``os.path`` nothing here touches the network or the
local disk; a path is never assumed to exist.

"""

_wild_chars = frozenset('*?[]!{}')


def url_path(path):
    """Prepare a path for use as the tail of a request URL.

    An encoded slash (``%2F``) is turned back in to a separator, so that
    paths which went through a layer that forbids raw slashes still address
    nested resources, and spaces are percent encoded. Nothing else is
    escaped; this is not a general purpose URL encoder.

    :param path: Path to convert

    >>> url_path('foo%2Fbar baz.txt')
    'foo/bar%20baz.txt'

    """
    return path.replace('%2F', '/').replace(' ', '%20')


def isabs(path):
    """Return True if path is an absolute path."""
    return path.startswith('/')


def abspath(path):
    """Convert the given path to an absolute path.

    Since HTTPFS objects have no concept of a 'current directory' this simply
    adds a leading '/' character if the path doesn't already have one.

    """
    if not path.startswith('/'):
        return '/' + path
    return path


def relpath(path):
    """Convert the given path to a relative path.

    This is the inverse of abspath(), stripping a leading '/' from the
    path if it is present.

    :param path: Path to adjust

    >>> relpath('/a/b')
    'a/b'

    """
    return path.lstrip('/')


def forcedir(path):
    """Ensure the path ends with exactly one trailing separator

    Backslashes at the end of the path count as separators too.

    :param path: An HTTPFS path

    >>> forcedir("foo/bar")
    'foo/bar/'
    >>> forcedir("foo/bar//")
    'foo/bar/'

    """
    return path.rstrip('/\\') + '/'


def iswildcard(path):
    """Check if a path contains a wildcard

    >>> iswildcard('foo/bar/baz.*')
    True
    >>> iswildcard('foo/bar')
    False

    """
    assert path is not None
    return not _wild_chars.isdisjoint(path)
