"""Errors surfaced to the user by the departure monitor."""


class EfaDeparturesError(Exception):
    """Base class for all user-visible errors."""


class UsageError(EfaDeparturesError):
    """The command line could not be turned into a request."""


class RequestError(EfaDeparturesError):
    """The EFA service reported a request-level error."""


class EmptyResultError(EfaDeparturesError):
    """There are no rows left to display."""

    def __init__(self, message: str = "Nothing to show") -> None:
        super().__init__(message)
