class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class AuthenticationError(DomainError):
    """Raised when login fails. Subclasses must not be told apart in the UI."""


class InvalidCredentials(AuthenticationError):
    """No teacher matches the login id and password."""


class MissingSchool(AuthenticationError):
    """Credentials matched but the teacher's school does not resolve."""


class NoSheetLinks(DomainError):
    """The school has no class sections. Non-fatal for login."""


class DatabaseError(DomainError):
    """Query failed inside the data store."""


class NetworkError(DomainError):
    """Data store or relay endpoint unreachable, or the call timed out."""


class RelayError(DomainError):
    """The attendance script endpoint rejected a submission."""


class ConfigurationError(Exception):
    """Required settings are missing. Fatal at startup."""
