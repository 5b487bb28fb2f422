class MappingError(ValueError):
    """Base error for invalid mapper configuration and malformed records."""


class PathSyntaxError(MappingError):
    pass


class MalformedRecordError(MappingError):
    """Raised while mapping a single raw order; the mapper skips that order."""
