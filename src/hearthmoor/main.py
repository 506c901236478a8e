"""Main entry point for loading the Hearthmoor MUD world."""

import asyncio
import logging
import sys

import structlog

from hearthmoor.config import Settings, get_settings
from hearthmoor.game.world import DiscoveryError, WorldIndex, WorldLoader

logger = structlog.get_logger(__name__)


def configure_logging(settings: Settings) -> None:
    """
    Configure structlog from the logging settings.

    Args:
        settings: Application settings (log_level, log_format)
    """
    level = getattr(logging, settings.log_level.upper(), logging.INFO)

    if settings.log_format == "json":
        renderer: structlog.typing.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
    )


async def main() -> WorldIndex:
    """
    Main async entry point.

    Loads the world content and logs a per-area summary.
    """
    settings = get_settings()
    loader = WorldLoader(settings=settings)

    index = await loader.load_async(
        verbose=settings.verbose_load,
        on_complete=lambda: logger.info("world_load_pass_complete", root=str(loader.root_dir)),
    )

    for area_id, area in sorted(index.areas.items()):
        logger.info(
            "area_summary",
            area=area_id,
            title=area.get_title(settings.reference_locale),
            rooms=len(index.rooms_in_area(area_id)),
        )

    if loader.problems:
        logger.warning("world_loaded_with_problems", problems=len(loader.problems))

    return index


def run() -> None:
    """
    Synchronous entry point that runs the async main function.

    This is the function that should be called from the command line.
    """
    configure_logging(get_settings())

    try:
        asyncio.run(main())
    except DiscoveryError as e:
        logger.error("world_unavailable", error=str(e))
        sys.exit(1)
    except KeyboardInterrupt:
        logger.info("load_interrupted_by_user")


if __name__ == "__main__":
    run()
