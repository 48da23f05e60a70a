from typing import Optional


class FlashdrillError(Exception):
    """Base exception for recoverable flashdrill errors."""

    def __init__(
        self, message: str, original_exception: Optional[Exception] = None
    ):
        super().__init__(message)
        self.original_exception = original_exception


class NotFoundError(FlashdrillError):
    """Raised when a card file does not exist or cannot be opened."""

    pass


class InvalidInputError(FlashdrillError):
    """Raised when user input cannot be interpreted (e.g. a round count)."""

    pass


class CardIOError(FlashdrillError):
    """Raised for failures reading or writing card, export or log files."""

    pass


class EmptyStoreError(FlashdrillError):
    """Raised when a card is requested from an empty store."""

    pass
