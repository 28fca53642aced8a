"""Domain errors raised by the catalog and circulation services.

Each error carries the HTTP status and the notice shown to the user; the
API layer renders them through a single exception handler.
"""

from fastapi import status


class LibraryError(Exception):
    status_code: int = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class BookUnavailableError(LibraryError):
    """No available copy matches the requested title."""

    status_code = status.HTTP_409_CONFLICT

    def __init__(self, title: str) -> None:
        super().__init__(f'"{title}" is currently unavailable.')
        self.title = title


class BookAvailableError(LibraryError):
    """A reservation was requested for a title that can be borrowed."""

    status_code = status.HTTP_409_CONFLICT

    def __init__(self, title: str) -> None:
        super().__init__(f'"{title}" is available. You can borrow it.')
        self.title = title


class BookNotFoundError(LibraryError):
    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, title: str) -> None:
        super().__init__(f'"{title}" is not in the catalog.')
        self.title = title


class DuplicateTitleError(LibraryError):
    status_code = status.HTTP_409_CONFLICT

    def __init__(self, title: str) -> None:
        super().__init__(f'"{title}" is already in the catalog.')
        self.title = title


class OutOfRangeError(LibraryError):
    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, index: int) -> None:
        super().__init__(f"No book at index {index}.")
        self.index = index
