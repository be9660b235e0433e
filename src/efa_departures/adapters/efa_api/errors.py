"""Errors raised inside the EFA adapter."""


class EfaHttpError(Exception):
    """The departure monitor request failed at the HTTP level."""

    def __init__(self, reason: str, status: int | None = None) -> None:
        self.status = status
        self.reason = reason
        super().__init__(f"{status} {reason}" if status is not None else reason)


class InvalidRequestParameter(ValueError):
    """A date or time parameter cannot be sent to the service."""
