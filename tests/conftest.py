"""Shared pytest fixtures for carousel tests."""

from collections.abc import AsyncGenerator, Generator

import pytest
import pytest_asyncio

from src.adapters.memory_region import create_memory_region
from src.clients.web import CarouselView
from src.core.config import CarouselSettings
from src.core.content import DEFAULT_TESTIMONIALS
from src.ports.region import CarouselRegion

# Configure pytest-asyncio for async tests
pytest_plugins = ["pytest_asyncio"]

# Short period used wherever a test needs real timer ticks
FAST_AUTO_ADVANCE_MS = 20


@pytest.fixture
def region() -> CarouselRegion:
    """Provide an in-memory region holding the four homepage testimonials.

    Returns:
        CarouselRegion: Container, four dots, and the prev/next buttons.
    """
    return create_memory_region(DEFAULT_TESTIMONIALS)


@pytest.fixture
def manual_settings() -> CarouselSettings:
    """Provide settings with auto-advance switched off.

    Views built with these settings can be mounted without an event loop,
    and only move when a test tells them to.
    """
    return CarouselSettings(auto_advance_enabled=False)


@pytest.fixture
def fast_settings() -> CarouselSettings:
    """Provide settings with a very short auto-advance period."""
    return CarouselSettings(auto_advance_ms=FAST_AUTO_ADVANCE_MS)


@pytest.fixture
def view(
    region: CarouselRegion, manual_settings: CarouselSettings
) -> Generator[CarouselView, None, None]:
    """Provide a mounted view without auto-advance.

    The view is unmounted after the test completes.

    Yields:
        CarouselView: A mounted view showing slide 0.
    """
    carousel = CarouselView(region, manual_settings)
    carousel.mount()
    yield carousel
    carousel.unmount()


@pytest_asyncio.fixture
async def auto_view(
    region: CarouselRegion, fast_settings: CarouselSettings
) -> AsyncGenerator[CarouselView, None]:
    """Provide a mounted view whose timer is actually running.

    Yields:
        CarouselView: A mounted view with a fast auto-advance timer.
    """
    carousel = CarouselView(region, fast_settings)
    carousel.mount()
    yield carousel
    carousel.unmount()
