"""Ports (interfaces) for the application.

This module contains Protocol definitions that define the boundary between
the carousel and the page region it renders into.
"""

from src.ports.region import (
    ActivationHandler,
    ActivationTarget,
    CarouselRegion,
    DotIndicator,
    SlideContainer,
)

__all__ = [
    # Data classes
    "CarouselRegion",
    # Protocols
    "ActivationHandler",
    "ActivationTarget",
    "DotIndicator",
    "SlideContainer",
]
