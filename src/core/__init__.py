"""Core business logic and protocols.

This module contains the platform-agnostic carousel logic together with the
logging, configuration, and error handling shared by every client.
"""

from src.core.carousel_logic import CarouselController, CarouselState
from src.core.config import CarouselSettings, load_settings
from src.core.content import DEFAULT_TESTIMONIALS, Testimonial, load_testimonials
from src.core.errors import (
    CarouselError,
    ErrorCategory,
    IndexOutOfRangeError,
    InvalidConfigurationError,
    is_configuration_error,
)
from src.core.logging import (
    bind_contextvars,
    clear_contextvars,
    configure_logging,
    get_logger,
    log_context,
    unbind_contextvars,
)
from src.core.timer import AutoAdvanceTimer

__all__ = [
    # Carousel
    "CarouselController",
    "CarouselState",
    "AutoAdvanceTimer",
    # Configuration
    "CarouselSettings",
    "load_settings",
    # Content
    "DEFAULT_TESTIMONIALS",
    "Testimonial",
    "load_testimonials",
    # Error handling
    "CarouselError",
    "ErrorCategory",
    "IndexOutOfRangeError",
    "InvalidConfigurationError",
    "is_configuration_error",
    # Logging
    "bind_contextvars",
    "clear_contextvars",
    "configure_logging",
    "get_logger",
    "log_context",
    "unbind_contextvars",
]
