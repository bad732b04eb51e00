"""Account domain specific exceptions."""


class AccountError(Exception):
    """Base class for account domain errors."""


class EmailAlreadyRegisteredError(AccountError):
    """Raised when attempting to register an email that already exists."""


class InvalidCredentialsError(AccountError):
    """Raised when a registered user's password does not match."""


class AccountValidationError(AccountError):
    """Raised when login or registration input is malformed."""

    def __init__(self, message: str, details: dict | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details

