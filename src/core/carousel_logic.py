"""Carousel business logic - platform agnostic."""

from dataclasses import dataclass

from src.core.errors import IndexOutOfRangeError, InvalidConfigurationError

SLIDE_WIDTH_PERCENT = 100


def is_slide_index(index: object, slide_count: int) -> bool:
    """Return True for an int (not a bool) inside [0, slide_count)."""
    return (
        isinstance(index, int)
        and not isinstance(index, bool)
        and 0 <= index < slide_count
    )


@dataclass(frozen=True)
class CarouselState:
    """Position of a wrap-around slide carousel.

    Attributes:
        slide_count: Number of slides. Fixed for the life of the carousel.
        current_index: Zero-based index of the displayed slide.
    """

    slide_count: int
    current_index: int = 0

    def __post_init__(self) -> None:
        if self.slide_count <= 0:
            raise InvalidConfigurationError(
                f"Carousel needs at least one slide, got {self.slide_count}"
            )
        if not is_slide_index(self.current_index, self.slide_count):
            raise IndexOutOfRangeError(self.current_index, self.slide_count)

    @property
    def offset_percent(self) -> int:
        return -SLIDE_WIDTH_PERCENT * self.current_index

    @property
    def active_dot(self) -> int:
        return self.current_index

    @property
    def transform(self) -> str:
        """CSS transform that positions the slide track."""
        return f"translateX({self.offset_percent}%)"


class CarouselController:
    """Pure slide transitions. Every method returns a new state."""

    def next_slide(self, state: CarouselState) -> CarouselState:
        """Move forward one slide, wrapping from the last slide to the first."""
        return CarouselState(
            slide_count=state.slide_count,
            current_index=(state.current_index + 1) % state.slide_count,
        )

    def prev_slide(self, state: CarouselState) -> CarouselState:
        """Move back one slide, wrapping from the first slide to the last."""
        return CarouselState(
            slide_count=state.slide_count,
            current_index=(state.current_index - 1 + state.slide_count)
            % state.slide_count,
        )

    def go_to_index(self, state: CarouselState, index: int) -> CarouselState:
        """Jump to a specific slide.

        Raises:
            IndexOutOfRangeError: If index is not an int in [0, slide_count).
        """
        if not is_slide_index(index, state.slide_count):
            raise IndexOutOfRangeError(index, state.slide_count)
        return CarouselState(slide_count=state.slide_count, current_index=index)

    def offset_percent(self, state: CarouselState) -> int:
        return state.offset_percent
