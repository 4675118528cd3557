"""
Defines the Exception classes thrown by HTTPFS objects. Exceptions raised by
the HTTP transport are translated in to one of the following Exceptions.
Exceptions that relate to a path store that path in `self.path`.

All Exception classes are derived from `FSError` which can be used as a
catch-all exception.

"""

__all__ = ['FSError',
           'OperationFailedError',
           'UnsupportedError',
           'VisibilityUnsupportedError',
           'ResourceError',
           'MetadataUnavailableError',
           'FileUnreadableError',
           'NoMetaError',
           'InvalidContextError',
           ]


class FSError(Exception):
    """Base exception class for the httpfs module."""
    default_message = "Unspecified error"

    def __init__(self, msg=None, details=None):
        if msg is None:
            msg = self.default_message
        self.msg = msg
        self.details = details
        super(FSError, self).__init__(msg)

    def __str__(self):
        return self.msg % self.__dict__

    def __reduce__(self):
        return (self.__class__, (), self.__dict__.copy(),)


class OperationFailedError(FSError):
    """Base exception class for errors associated with a specific operation."""
    default_message = "Unable to %(opname)s: unspecified error [%(details)s]"

    def __init__(self, opname="", path=None, **kwds):
        self.opname = opname
        self.path = path
        super(OperationFailedError, self).__init__(**kwds)


class UnsupportedError(OperationFailedError):
    """Exception raised for operations that are not supported by the FS."""
    default_message = "Unable to %(opname)s: not supported by this filesystem"


class VisibilityUnsupportedError(UnsupportedError):
    """Exception raised when asked to change the visibility of a path."""
    default_message = ("Unable to %(opname)s: not supported by this filesystem. "
                       "Path: %(path)s, visibility: %(visibility)s")

    def __init__(self, path="", visibility=None, **kwds):
        self.visibility = visibility
        super(VisibilityUnsupportedError, self).__init__("set visibility", path=path, **kwds)

    def __reduce__(self):
        return (self.__class__, (self.path, self.visibility), self.__dict__.copy(),)


class ResourceError(FSError):
    """Base exception class for error associated with a specific resource."""
    default_message = "Unspecified resource error: %(path)s"

    def __init__(self, path="", **kwds):
        self.path = path
        self.opname = kwds.pop("opname", None)
        super(ResourceError, self).__init__(**kwds)


class MetadataUnavailableError(ResourceError):
    """Exception raised when the origin gives no usable metadata for a path."""
    default_message = "Unable to retrieve metadata: %(path)s"


class FileUnreadableError(ResourceError):
    """Exception raised when the contents of a file can't be fetched.

    `reason` holds the most specific message the transport produced.

    """
    default_message = "Unable to read file %(path)s: %(reason)s"

    def __init__(self, path="", reason=None, **kwds):
        self.reason = reason or kwds.get("details", None)
        super(FileUnreadableError, self).__init__(path, **kwds)


class NoMetaError(FSError):
    """Exception raised when there is no meta value available."""
    default_message = "No meta value named '%(meta_name)s' could be retrieved"

    def __init__(self, meta_name, msg=None):
        self.meta_name = meta_name
        super(NoMetaError, self).__init__(msg)

    def __reduce__(self):
        return (self.__class__, (self.meta_name,), self.__dict__.copy(),)


class InvalidContextError(FSError, ValueError):
    """Exception raised for a request context that can't be applied."""
    default_message = "Invalid request context: %(details)s"
