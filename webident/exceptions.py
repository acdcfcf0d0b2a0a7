"""webident specific exceptions."""


class IdentityError(Exception):
    """Base class for identity facts that cannot be derived."""


class NotFoundError(IdentityError, LookupError):
    """Raised when a browser-provided value is missing, e.g. the document domain."""

    pass


class PermissionDeniedError(IdentityError, PermissionError):
    """Raised when the browser does not expose a user agent string at all."""

    pass


class InvalidDataError(IdentityError, ValueError):
    """Raised when a user agent string lacks the expected platform parenthetical."""

    pass
