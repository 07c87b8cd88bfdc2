"""Rendering-surface protocols for a mounted carousel.

This module defines the interfaces (Protocols) between the carousel view and
the page region it is mounted in. The view only ever sees indices and
offsets; slide content stays on the page side.
"""

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Protocol

# Handlers take no arguments; dot handlers are bound to their index at mount.
ActivationHandler = Callable[[], None]


# =============================================================================
# Protocols
# =============================================================================


class ActivationTarget(Protocol):
    """Something the user can activate, such as the previous/next buttons."""

    def add_listener(self, handler: ActivationHandler) -> None:
        """Register a handler called on every activation."""
        ...

    def remove_listener(self, handler: ActivationHandler) -> None:
        """Unregister a handler previously passed to add_listener."""
        ...


class DotIndicator(ActivationTarget, Protocol):
    """A navigation dot: shows whether its slide is active and can be clicked."""

    def set_active(self, active: bool) -> None:
        """Mark the dot as the active (or an inactive) indicator."""
        ...


class SlideContainer(Protocol):
    """The element holding the slide track."""

    @property
    def slide_count(self) -> int:
        """Number of slides inside the container."""
        ...

    def apply_offset(self, offset_percent: int) -> None:
        """Shift the slide track horizontally by a percentage of its width."""
        ...


# =============================================================================
# Data Classes
# =============================================================================


@dataclass
class CarouselRegion:
    """The mounted page area a carousel view renders into.

    Attributes:
        container: Element holding the slides.
        dots: One indicator per slide, in slide order.
        prev_target: Activation target for the "previous" control.
        next_target: Activation target for the "next" control.
    """

    container: SlideContainer
    dots: Sequence[DotIndicator]
    prev_target: ActivationTarget
    next_target: ActivationTarget
