from typing import Optional


class OsVersionError(Exception):
    """
    Base exception for host OS detection errors.

    Args:
        message (str): The error message.
    """
    def __init__(self, message: str = "Unable to detect the host operating system."):
        self.message = message
        super().__init__(self.message)


class MissingFieldError(OsVersionError):
    """
    Error raised when a mandatory field is absent from its source.

    Args:
        field (str): The name of the missing field.
        source (str): Where the field was expected.
        message (str): The error message template.
    """
    def __init__(self, field: str, source: str,
                 message: str = "Mandatory field {field} is missing from {source}"):
        self.field = field
        self.source = source
        self.message = message.format(field=field, source=source)
        super().__init__(self.message)


class TypeMismatchError(OsVersionError):
    """
    Error raised when a field is present but does not have the expected shape.

    Args:
        field (str): The name of the offending field.
        expected (str): A description of the expected type.
        source (str): Where the field was read from.
        actual (Optional[str]): The type name that was found instead.
    """
    def __init__(self, field: str, expected: str, source: str,
                 actual: Optional[str] = None,
                 message: str = "{field} in {source} is not a {expected}"):
        self.field = field
        self.expected = expected
        self.source = source
        self.actual = actual
        info = f" (found {actual})" if actual else ""
        self.message = message.format(field=field, expected=expected, source=source) + info
        super().__init__(self.message)


class ReleaseFileReadError(OsVersionError):
    """
    Error raised when a release file cannot be read.

    The underlying ``OSError`` is kept as ``__cause__``.

    Args:
        path (str): The file that could not be read.
        reason (Optional[str]): The reason for the error.
    """
    def __init__(self, path: str, reason: Optional[str] = None,
                 message: str = "Unable to read release file {path}"):
        self.path = path
        self.reason = reason
        info = f": {reason}" if reason else ""
        self.message = message.format(path=path) + info
        super().__init__(self.message)


class MalformedReleaseFileError(OsVersionError):
    """
    Error raised when a release file is readable but cannot be parsed.

    Args:
        path (str): The offending file.
        reason (Optional[str]): The reason for the error.
    """
    def __init__(self, path: str, reason: Optional[str] = None,
                 message: str = "Release file {path} appears to be malformed or corrupted"):
        self.path = path
        self.reason = reason
        info = f": {reason}" if reason else ""
        self.message = message.format(path=path) + info
        super().__init__(self.message)


class SystemCallError(OsVersionError):
    """
    Error raised when a system routine cannot be resolved or reports failure.

    Args:
        routine (str): The name of the routine that failed.
        reason (Optional[str]): The reason for the error.
    """
    def __init__(self, routine: str, reason: Optional[str] = None,
                 message: str = "System call {routine} failed"):
        self.routine = routine
        self.reason = reason
        info = f": {reason}" if reason else ""
        self.message = message.format(routine=routine) + info
        super().__init__(self.message)
