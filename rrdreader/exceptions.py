class Error(Exception):
    """
    Base class for errors
    """
    def __str__(self):
        return repr(self)


class InvalidRRD(Error):
    """
    The buffer does not hold an RRD file this reader understands.
    """
    def __init__(self, message):
        Error.__init__(self, message)
        self.message = message

    def __repr__(self):
        return "<%s: %s>" % (self.__class__.__name__, self.message)


class InvalidFormat(InvalidRRD):
    """
    Wrong magic id
    """
    def __init__(self, message="Wrong magic id."):
        InvalidRRD.__init__(self, message)


class UnsupportedVersion(InvalidRRD):
    """
    Version string other than 0003 or 0004
    """
    def __init__(self, version):
        InvalidRRD.__init__(self, "Unsupported RRD version %r." % version)
        self.version = version


class UnsupportedPlatform(InvalidRRD):
    """
    The float cookie was found at none of the known offsets.
    """
    def __init__(self, message="Unsupported platform."):
        InvalidRRD.__init__(self, message)


class TruncatedData(InvalidRRD):
    """
    A read ran past the end of the buffer.
    """
    def __init__(self, offset, size, length):
        InvalidRRD.__init__(self,
            "Read of %s bytes at offset %s past end of data (%s bytes)." % (
                size, offset, length))
        self.offset = offset
        self.size = size
        self.length = length


class IndexOutOfRange(Error, IndexError):
    """
    An index given by the caller is outside [0, limit).

    >>> str(IndexOutOfRange("DS", 5, 2))
    '<IndexOutOfRange: DS idx (5) out of range [0-2).>'
    """
    def __init__(self, kind, value, limit):
        Error.__init__(self, kind, value, limit)
        self.kind = kind
        self.value = value
        self.limit = limit

    def __repr__(self):
        return "<IndexOutOfRange: %s idx (%s) out of range [0-%s).>" % (
            self.kind, self.value, self.limit)


class ConfigError(Error):
    """
    Error in config file
    """
    def __init__(self, identifier):
        Error.__init__(self)
        self.identifier = identifier

    def __repr__(self):
        return("<ConfigError for parameter \"%s\" (wrong or undefined)>"
                % (self.identifier))


class ConfigFileNotFound(Error):
    '''
    Configuration file not found error message.
    '''
    def __init__(self, identifier):
        Error.__init__(self)
        self.identifier = identifier

    def __repr__(self):
        return("<Configuration file not found in any of the following known locations: \"%s\">"
                % (self.identifier))
