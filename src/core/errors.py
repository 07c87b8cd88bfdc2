"""Carousel error hierarchy.

Every carousel failure is permanent: nothing here does I/O, so nothing can be
retried. Each error carries an ErrorCategory so callers can decide whether
the failure aborts setup (CONFIGURATION) or is a rejected call that leaves
the carousel untouched (INVALID_INPUT).

Example:
    from src.core.errors import IndexOutOfRangeError

    try:
        view.go_to(index)
    except IndexOutOfRangeError as ex:
        logger.warning("dot_rejected", index=ex.index)
"""

from enum import Enum, auto


class ErrorCategory(Enum):
    """Classification of carousel errors for handling decisions."""

    INVALID_INPUT = auto()  # Rejected call, state left unchanged
    CONFIGURATION = auto()  # Setup cannot proceed


class CarouselError(Exception):
    """Base class for carousel errors.

    Attributes:
        category: The kind of failure.
    """

    category: ErrorCategory = ErrorCategory.CONFIGURATION

    def __init__(self, message: str, category: ErrorCategory | None = None) -> None:
        super().__init__(message)
        if category is not None:
            self.category = category


class InvalidConfigurationError(CarouselError):
    """Carousel setup is invalid (empty slide set, bad period, bad env value)."""

    category = ErrorCategory.CONFIGURATION


class IndexOutOfRangeError(CarouselError):
    """A slide index outside [0, slide_count) was requested.

    Attributes:
        index: The rejected index.
        slide_count: Number of slides the carousel holds.
    """

    category = ErrorCategory.INVALID_INPUT

    def __init__(self, index: object, slide_count: int) -> None:
        super().__init__(
            f"Slide index {index} is out of range for {slide_count} slides"
        )
        self.index = index
        self.slide_count = slide_count


def is_configuration_error(error: Exception) -> bool:
    """Check whether an exception means carousel setup must abort.

    Args:
        error: The exception to check.

    Returns:
        True if the error is a CarouselError in the CONFIGURATION category.
    """
    return (
        isinstance(error, CarouselError)
        and error.category is ErrorCategory.CONFIGURATION
    )
