"""In-memory implementation of the carousel region protocols.

This module provides a headless stand-in for the homepage DOM:
- MemorySlideContainer (the #testimonials-carousel element)
- MemoryDot (a .carousel-dot element)
- MemoryButton (#prev-btn / #next-btn)

Nothing is drawn; the adapter records what a browser would show so tests and
the preview entry point can inspect it.
"""

from collections.abc import Sequence
from typing import Any

from src.core.config import DEFAULT_ACTIVE_CLASS
from src.ports.region import ActivationHandler, CarouselRegion

CONTAINER_ID = "testimonials-carousel"
PREV_BUTTON_ID = "prev-btn"
NEXT_BUTTON_ID = "next-btn"
DOT_CLASS = "carousel-dot"


class MemoryButton:
    """A clickable element holding its registered listeners."""

    def __init__(self, element_id: str) -> None:
        self.element_id = element_id
        self._listeners: list[ActivationHandler] = []

    @property
    def listener_count(self) -> int:
        return len(self._listeners)

    def add_listener(self, handler: ActivationHandler) -> None:
        self._listeners.append(handler)

    def remove_listener(self, handler: ActivationHandler) -> None:
        # Silently ignores unknown handlers, like removeEventListener
        if handler in self._listeners:
            self._listeners.remove(handler)

    def click(self) -> None:
        """Invoke every registered listener in registration order."""
        for handler in list(self._listeners):
            handler()


class MemoryDot(MemoryButton):
    """A navigation dot with a class list."""

    def __init__(self, index: int, active_class: str = DEFAULT_ACTIVE_CLASS) -> None:
        super().__init__(f"{DOT_CLASS}-{index}")
        self.index = index
        self.active_class = active_class
        self.classes: set[str] = {DOT_CLASS}

    @property
    def is_active(self) -> bool:
        return self.active_class in self.classes

    def set_active(self, active: bool) -> None:
        if active:
            self.classes.add(self.active_class)
        else:
            self.classes.discard(self.active_class)


class MemorySlideContainer:
    """The slide track. Keeps the current transform and every offset applied."""

    def __init__(self, slides: Sequence[Any]) -> None:
        self.element_id = CONTAINER_ID
        self._slides = tuple(slides)
        self.transform = ""
        self.applied_offsets: list[int] = []

    @property
    def slide_count(self) -> int:
        return len(self._slides)

    def apply_offset(self, offset_percent: int) -> None:
        self.transform = f"translateX({offset_percent}%)"
        self.applied_offsets.append(offset_percent)


def create_memory_region(
    slides: Sequence[Any], active_class: str = DEFAULT_ACTIVE_CLASS
) -> CarouselRegion:
    """Build a region with one dot per slide and previous/next buttons.

    Args:
        slides: Slide content. Only its length matters to the carousel.
        active_class: Class toggled on the active dot.

    Returns:
        A CarouselRegion backed by in-memory elements.

    Example:
        region = create_memory_region(DEFAULT_TESTIMONIALS)
        region.next_target.click()
    """
    return CarouselRegion(
        container=MemorySlideContainer(slides),
        dots=[MemoryDot(i, active_class) for i in range(len(slides))],
        prev_target=MemoryButton(PREV_BUTTON_ID),
        next_target=MemoryButton(NEXT_BUTTON_ID),
    )
