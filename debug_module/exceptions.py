"""Exceptions raised by the debug logger"""


class SpecificationError(ValueError):
    """Raised when a DEBUG specification string cannot be compiled."""

    def __init__(self, message: str, token: str = ""):
        super().__init__(message)
        self.token = token
