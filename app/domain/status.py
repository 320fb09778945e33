from enum import Enum


class Status(str, Enum):
    """Outcome of a write operation as seen by the presentation layer."""
    SUCCESS = 'success'
    CONFLICT = 'conflict'
    NOT_FOUND = 'not_found'
    VALIDATION_FAILED = 'validation_failed'
    STORE_ERROR = 'store_error'

    def __bool__(self) -> bool:
        return self is Status.SUCCESS
