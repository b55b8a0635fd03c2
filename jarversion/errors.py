class JarVersionError(Exception):
    """Base class for jarversion errors."""


# Command line
class ArgumentError(JarVersionError):
    pass


# Archive access
class ArchiveOpenError(JarVersionError):
    pass


class EntryReadError(JarVersionError):
    pass


# Content hash
class HashComputeError(JarVersionError):
    pass


# Output sinks
class OutputWriteError(JarVersionError):
    pass
