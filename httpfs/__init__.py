"""

  httpfs:  a read-only filesystem over HTTP.

This module provides the 'HTTPFS' class, which exposes the resources served
beneath a base URL through a filesystem-style interface:

    file_exists / directory_exists:   probe the origin with HEAD (or GET)
    get_metadata:                     size, modification time and mime type
                                      decoded from the response headers
    read / read_stream / open:        fetch file contents

Operations that would change the remote tree raise UnsupportedError.

"""

__version__ = "1.0.0"

import logging as _logging

_logging.getLogger("httpfs").addHandler(_logging.NullHandler())


def getLogger(name):
    """Get a logger object for use within the httpfs library."""
    assert name.startswith("httpfs.")
    return _logging.getLogger(name)


#  provide these by default so people can use 'httpfs.path.forcedir' etc.
from httpfs import errors
from httpfs import path
from httpfs.base import FileAttributes, PUBLIC, PRIVATE
from httpfs.request import RequestContext
from httpfs.httpfs import HTTPFS

__all__ = ['HTTPFS',
           'RequestContext',
           'FileAttributes',
           'PUBLIC',
           'PRIVATE',
           'errors',
           'path',
           'getLogger']
