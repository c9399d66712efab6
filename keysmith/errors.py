"""
keysmith.errors
Exception types shared by the generator, the form validation and the front-ends.
"""


class KeySmithError(Exception):
    """Base class for every error raised by keysmith."""


class InvalidRequest(KeySmithError, ValueError):
    """The generator was handed a request it cannot satisfy."""


class NoClassSelected(InvalidRequest):
    def __init__(self, message: str = "At least one character class must be enabled"):
        super().__init__(message)


class ValidationError(KeySmithError, ValueError):
    """
    A form field failed validation. `message` is meant to be shown to the user
    as-is, next to the field named by `field`.
    """

    def __init__(self, field: str, message: str):
        super().__init__(message)
        self.field = field
        self.message = message
