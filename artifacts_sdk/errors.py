"""Exceptions raised by the SDK."""


class ClientError(Exception):
    """Base class for errors raised while building or using a client."""


class ApiError(ClientError):
    """An API call failed; the underlying error is kept in ``error``."""

    def __init__(self, error):
        self.error = error
        super().__init__(f"API Error: {error}")


class InvalidGearError(ValueError):
    """A gear set holds the same item in two slots that must differ."""