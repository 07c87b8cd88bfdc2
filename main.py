"""Entry point for a headless preview of the testimonials carousel.

Mounts the carousel on an in-memory region and logs every slide change until
the preview time runs out.

Usage:
    CAROUSEL_AUTO_ADVANCE_MS=1000 CAROUSEL_PREVIEW_SECONDS=5 python main.py
"""

import asyncio
import os

from src.adapters.memory_region import create_memory_region
from src.clients.web import CarouselView
from src.core.config import load_settings
from src.core.content import DEFAULT_TESTIMONIALS
from src.core.errors import InvalidConfigurationError
from src.core.logging import configure_logging, get_logger, log_context

# Configure structured logging (reads ENVIRONMENT and LOG_LEVEL from env)
configure_logging()

logger = get_logger(__name__)


async def run_preview(duration_seconds: float) -> int:
    """Run the carousel for a while and return the final slide index."""
    settings = load_settings()
    region = create_memory_region(DEFAULT_TESTIMONIALS, settings.active_class)

    with log_context(page="home", section="testimonials"):
        async with CarouselView(region, settings) as view:
            logger.info(
                "preview_started",
                slides=[t.name for t in DEFAULT_TESTIMONIALS],
                duration_seconds=duration_seconds,
            )
            await asyncio.sleep(duration_seconds)
            final_index = view.current_index

        logger.info(
            "preview_finished",
            final_index=final_index,
            showing=DEFAULT_TESTIMONIALS[final_index].name,
            transform=region.container.transform,
        )
    return final_index


def main() -> None:
    try:
        duration = float(os.getenv("CAROUSEL_PREVIEW_SECONDS", "30"))
    except ValueError as ex:
        raise InvalidConfigurationError(
            "CAROUSEL_PREVIEW_SECONDS must be a number"
        ) from ex
    asyncio.run(run_preview(duration))


if __name__ == "__main__":
    main()
