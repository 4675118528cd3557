"""
httpfs.base
===========

This module defines the filesystem abstraction that HTTPFS plugs in to, the FS
class. Instances of FS represent a filesystem containing files and
directories that can be queried and, where the backend allows it,
manipulated. Every operation raises :class:`~httpfs.errors.UnsupportedError`
until a subclass provides it, so a read-only backend only needs to implement
the queries it can answer.

"""

__all__ = ['PUBLIC',
           'PRIVATE',
           'NoDefaultMeta',
           'FileAttributes',
           'FS']

import datetime

from httpfs.errors import UnsupportedError, NoMetaError


PUBLIC = 'public'
PRIVATE = 'private'


class NoDefaultMeta(object):
    """A singleton used to signify that there is no default for getmeta"""
    pass


class FileAttributes(object):
    """Read-only metadata for a single path.

    Any attribute the backend could not determine is ``None``; missing
    values are never replaced with zero or an empty string.

    :param path: the path the attributes describe
    :param file_size: size in bytes, or None
    :param visibility: :data:`PUBLIC` or :data:`PRIVATE`, or None
    :param last_modified: modification time as a Unix timestamp, or None
    :param mime_type: mime type without parameters, or None

    """

    __slots__ = ('_path', '_file_size', '_visibility', '_last_modified', '_mime_type')

    def __init__(self, path, file_size=None, visibility=None, last_modified=None, mime_type=None):
        self._path = path
        self._file_size = file_size
        self._visibility = visibility
        self._last_modified = last_modified
        self._mime_type = mime_type

    path = property(lambda self: self._path)
    file_size = property(lambda self: self._file_size)
    visibility = property(lambda self: self._visibility)
    last_modified = property(lambda self: self._last_modified)
    mime_type = property(lambda self: self._mime_type)

    def _astuple(self):
        return (self._path, self._file_size, self._visibility, self._last_modified, self._mime_type)

    def __eq__(self, other):
        if not isinstance(other, FileAttributes):
            return NotImplemented
        return self._astuple() == other._astuple()

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self):
        return hash(self._astuple())

    def __repr__(self):
        return "<FileAttributes %r size=%r visibility=%r last_modified=%r mime_type=%r>" % self._astuple()

    def to_info(self):
        """Return the attributes as an info dict.

        Keys are only present for values that are known. ``modified_time``
        is a timezone aware :class:`datetime.datetime` in UTC.

        """
        info = {}
        if self._file_size is not None:
            info['size'] = self._file_size
        if self._last_modified is not None:
            info['modified_time'] = datetime.datetime.fromtimestamp(self._last_modified,
                                                                    datetime.timezone.utc)
        if self._mime_type is not None:
            info['mime_type'] = self._mime_type
        if self._visibility is not None:
            info['visibility'] = self._visibility
        return info


class FS(object):
    """The base class for Filesystem abstraction objects.

    An instance of a class derived from FS is an abstraction on some kind of
    filesystem, such as a tree of resources served over HTTP.

    """

    _meta = {}

    def __init__(self):
        self.closed = False
        super(FS, self).__init__()

    def __enter__(self):
        return self

    def __exit__(self, type, value, traceback):
        self.close()

    def close(self):
        """Close the filesystem. This will perform any shutdown related
        operations required. Streams already handed out by the filesystem
        are owned by the caller and are not closed.

        """
        self.closed = True

    def getmeta(self, meta_name, default=NoDefaultMeta):
        """Retrieve a meta value associated with an FS object.

        Meta values are a way for an FS implementation to report potentially
        useful information associated with the file system. The following
        are common:

         * *read_only* True if the file system cannot be modified
         * *thread_safe* True if the implementation is thread safe
         * *network* True if the file system requires network access

        :param meta_name: The name of the meta value to retrieve
        :param default: An option default to return, if the meta value isn't present
        :raises `httpfs.errors.NoMetaError`: If specified meta value is not present, and there is no default

        """
        if meta_name not in self._meta:
            if default is not NoDefaultMeta:
                return default
            raise NoMetaError(meta_name=meta_name)
        return self._meta[meta_name]

    def hasmeta(self, meta_name):
        """Check that a meta value is supported

        :param meta_name: The name of a meta value to check
        :rtype: bool

        """
        try:
            self.getmeta(meta_name)
        except NoMetaError:
            return False
        return True

    def getpathurl(self, path, allow_none=False):
        """Returns a url that corresponds to the given path, if one exists.

        :param path: a path within the filesystem
        :param allow_none: if true, this method can return None if there is no
            URL form of the given path
        :raises `httpfs.errors.UnsupportedError`: If no URL form exists, and allow_none is False (the default)

        """
        if not allow_none:
            raise UnsupportedError("get path url", path=path)
        return None

    def haspathurl(self, path):
        """Check if the path has an equivalent URL form"""
        return self.getpathurl(path, allow_none=True) is not None

    def file_exists(self, path):
        """Check if a path references an existing file.

        :rtype: bool

        """
        raise UnsupportedError("check for file", path=path)

    def directory_exists(self, path):
        """Check if a path references an existing directory.

        :rtype: bool

        """
        raise UnsupportedError("check for directory", path=path)

    def exists(self, path):
        """Check if a path references a valid resource."""
        return self.file_exists(path) or self.directory_exists(path)

    def isfile(self, path):
        return self.file_exists(path)

    def isdir(self, path):
        return self.directory_exists(path)

    def get_metadata(self, path):
        """Retrieve the :class:`FileAttributes` of a path.

        :raises `httpfs.errors.MetadataUnavailableError`: if the metadata can't be retrieved

        """
        raise UnsupportedError("get metadata", path=path)

    def mime_type(self, path):
        return self.get_metadata(path)

    def file_size(self, path):
        return self.get_metadata(path)

    def last_modified(self, path):
        return self.get_metadata(path)

    def visibility(self, path):
        raise UnsupportedError("get visibility", path=path)

    def getinfo(self, path):
        """Returns information for a path as a dictionary.

        The keys are those of :meth:`FileAttributes.to_info`.

        """
        return self.get_metadata(path).to_info()

    def read(self, path):
        """Return the contents of a file as bytes.

        :raises `httpfs.errors.FileUnreadableError`: if the file can't be read

        """
        raise UnsupportedError("read file", path=path)

    def read_stream(self, path):
        """Open a file for reading and return a binary file-like object.

        The returned object belongs to the caller, who must close it.

        :raises `httpfs.errors.FileUnreadableError`: if the file can't be opened

        """
        raise UnsupportedError("read file", path=path)

    def write(self, path, contents, config=None):
        raise UnsupportedError("write file", path=path)

    def write_stream(self, path, contents, config=None):
        raise UnsupportedError("write file", path=path)

    def delete(self, path):
        raise UnsupportedError("delete file", path=path)

    def delete_directory(self, path):
        raise UnsupportedError("delete directory", path=path)

    def create_directory(self, path, config=None):
        raise UnsupportedError("create directory", path=path)

    def list_contents(self, path='', deep=False):
        raise UnsupportedError("list directory", path=path)

    def move(self, source, destination, config=None):
        raise UnsupportedError("move file", path=source)

    def copy(self, source, destination, config=None):
        raise UnsupportedError("copy file", path=source)

    def set_visibility(self, path, visibility):
        raise UnsupportedError("set visibility", path=path)
