class ZenginError(Exception):
    """Base class of every error raised by zengincode."""


class DataSourceError(ZenginError, OSError):
    """A data file exists but could not be read or decoded."""


class NotFoundError(DataSourceError):
    """A bank index or branch index file is absent."""


class ParseError(ZenginError, ValueError):
    """A data file is not valid JSON or does not match the record schema."""


class PatternError(ZenginError, ValueError):
    """A search pattern is not a valid regular expression."""

    def __init__(self, pattern, error):
        super().__init__('invalid pattern %r: %s' % (pattern, error))
        self.pattern = pattern
