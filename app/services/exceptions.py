"""Domain errors raised by the credential store and session gate."""


class CredentialStoreError(Exception):
    """Base class for business outcomes the HTTP layer maps to a status code."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class UserNotFoundError(CredentialStoreError):
    """No user exists for the given id."""


class UsernameTakenError(CredentialStoreError):
    """Another user already has this username."""


class InvalidCredentialsError(CredentialStoreError):
    """Username/password pair did not match; the message never says which part was wrong."""
