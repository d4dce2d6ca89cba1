"""
Poetry service errors
"""


class PoetryServiceError(Exception):
    """Base error carrying a message safe to return to clients"""

    message = "Server error"

    def __init__(self, message: str = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class DuplicateEmailError(PoetryServiceError):
    message = "Email already exists"


class UserNotFoundError(PoetryServiceError):
    message = "User not found"


class InvalidCredentialsError(PoetryServiceError):
    message = "Incorrect password"


class StoreError(PoetryServiceError):
    """Any database failure other than the ones above"""
    message = "Internal server error"
