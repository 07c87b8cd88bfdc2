"""Testimonials carousel view for the homepage."""

from functools import partial
from types import TracebackType
from uuid import uuid4

from src.core.carousel_logic import CarouselController, CarouselState
from src.core.config import CarouselSettings
from src.core.errors import IndexOutOfRangeError, InvalidConfigurationError
from src.core.logging import get_logger
from src.core.timer import AutoAdvanceTimer
from src.ports.region import ActivationHandler, ActivationTarget, CarouselRegion

logger = get_logger(__name__)


class CarouselView:
    """A carousel mounted in a page region.

    The view owns the slide state, the auto-advance timer, and the handlers it
    registers on the region. Everything it acquires in mount() is released in
    unmount().

    Example:
        view = CarouselView(create_memory_region(DEFAULT_TESTIMONIALS))
        view.mount()  # inside a running event loop
        view.next()
        view.offset_percent  # -100
        view.unmount()
    """

    def __init__(
        self,
        region: CarouselRegion,
        settings: CarouselSettings | None = None,
        controller: CarouselController | None = None,
    ) -> None:
        self.region = region
        self.settings = settings or CarouselSettings()
        self.controller = controller or CarouselController()
        self.carousel_id = uuid4().hex[:8]
        self.state: CarouselState | None = None
        self.timer: AutoAdvanceTimer | None = None
        self._handlers: list[tuple[ActivationTarget, ActivationHandler]] = []
        self._closed = False
        self._log = logger.bind(carousel_id=self.carousel_id)

    @property
    def mounted(self) -> bool:
        return self.state is not None and not self._closed

    @property
    def current_index(self) -> int:
        return self.state.current_index if self.state else 0

    @property
    def slide_count(self) -> int:
        return self.state.slide_count if self.state else 0

    @property
    def offset_percent(self) -> int:
        return self.state.offset_percent if self.state else 0

    @property
    def active_dot_index(self) -> int:
        return self.state.active_dot if self.state else 0

    def mount(self) -> None:
        """Set up the carousel on its region and show the first slide.

        Raises:
            InvalidConfigurationError: If the region has no slides or its dot
                count does not match the slide count.
            RuntimeError: If the view was already unmounted, or auto-advance is
                enabled and no event loop is running.
        """
        if self._closed:
            raise RuntimeError("Carousel view was unmounted; create a new view")
        if self.state is not None:
            return

        slide_count = self.region.container.slide_count
        if len(self.region.dots) != slide_count:
            raise InvalidConfigurationError(
                f"Expected {slide_count} dot indicators, "
                f"found {len(self.region.dots)}"
            )
        state = CarouselState(slide_count=slide_count)

        timer = None
        if self.settings.auto_advance_enabled:
            timer = AutoAdvanceTimer(
                self.settings.auto_advance_seconds, self.on_auto_advance_tick
            )

        self.state = state
        try:
            self._register(self.region.prev_target, self.previous)
            self._register(self.region.next_target, self.next)
            for index, dot in enumerate(self.region.dots):
                self._register(dot, partial(self.go_to, index))
            self.render()
            # Started last: nothing after this point can raise.
            if timer is not None:
                timer.start()
        except Exception:
            self._release_handlers()
            self.state = None
            raise

        self.timer = timer
        self._log.info(
            "carousel_mounted",
            slide_count=slide_count,
            auto_advance_ms=(
                self.settings.auto_advance_ms if timer is not None else None
            ),
        )

    initialize = mount

    def unmount(self) -> None:
        """Cancel the timer and unregister every handler. Safe to call twice."""
        if self._closed:
            return
        self._closed = True

        if self.timer is not None:
            self.timer.cancel()
        self._release_handlers()

        self._log.info("carousel_unmounted", final_index=self.current_index)

    def next(self) -> None:
        """Advance one slide, wrapping to the first."""
        state = self._live_state("next")
        if state is not None:
            self._set_state(self.controller.next_slide(state), trigger="next")

    def previous(self) -> None:
        """Go back one slide, wrapping to the last."""
        state = self._live_state("previous")
        if state is not None:
            self._set_state(self.controller.prev_slide(state), trigger="previous")

    def go_to(self, index: int) -> None:
        """Jump to a slide.

        Raises:
            IndexOutOfRangeError: If index is not an int in [0, slide_count).
                The current slide is left unchanged.
        """
        state = self._live_state("go_to")
        if state is None:
            return
        try:
            new_state = self.controller.go_to_index(state, index)
        except IndexOutOfRangeError:
            self._log.warning(
                "slide_index_rejected",
                index=index,
                slide_count=state.slide_count,
            )
            raise
        self._set_state(new_state, trigger="go_to")

    def on_auto_advance_tick(self) -> None:
        """Timer callback. Same as next(); the timer keeps its own period."""
        state = self._live_state("auto_advance")
        if state is not None:
            self._log.debug("auto_advance_tick")
            self._set_state(self.controller.next_slide(state), trigger="auto_advance")

    def render(self) -> None:
        """Push the current offset and dot states to the region."""
        if self.state is None or self._closed:
            return
        self.region.container.apply_offset(self.state.offset_percent)
        for index, dot in enumerate(self.region.dots):
            dot.set_active(index == self.state.active_dot)

    async def __aenter__(self) -> "CarouselView":
        self.mount()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.unmount()

    def _register(self, target: ActivationTarget, handler: ActivationHandler) -> None:
        target.add_listener(handler)
        self._handlers.append((target, handler))

    def _release_handlers(self) -> None:
        for target, handler in self._handlers:
            target.remove_listener(handler)
        self._handlers.clear()

    def _live_state(self, operation: str) -> CarouselState | None:
        """Return the state to operate on, or None once unmounted."""
        if self._closed:
            self._log.warning("carousel_call_after_unmount", operation=operation)
            return None
        if self.state is None:
            raise RuntimeError(f"Carousel view must be mounted before {operation}()")
        return self.state

    def _set_state(self, state: CarouselState, trigger: str) -> None:
        self.state = state
        self.render()
        self._log.debug(
            "slide_changed",
            trigger=trigger,
            index=state.current_index,
            offset_percent=state.offset_percent,
        )
