class QuizAppError(Exception):
    """Base class for errors raised by repositories and use cases."""


class StoreUnavailableError(QuizAppError):
    """The database could not be opened or a statement failed."""


class NotFoundError(QuizAppError):
    """An update or delete matched no row."""


class ConflictError(QuizAppError):
    """A unique constraint rejected the row, e.g. a taken username."""


class ValidationFailedError(QuizAppError):
    """Input rejected before it reached a repository."""
