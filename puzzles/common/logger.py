import sys

from loguru import logger

PALETTE = {
    "bfs_solver": "green",
    "hoppers": "blue",
    "jam": "yellow",
    "model": "magenta",
    "cli": "cyan",
}

LEVEL_PER_COMPONENT = {
    "model": "INFO",
}

_default_level = "INFO"


def component_filter(record):
    comp = record["extra"].get("component", "")
    min_level = logger.level(LEVEL_PER_COMPONENT.get(comp, _default_level)).no
    return record["level"].no >= min_level


def formatter(record):
    comp = record["extra"].get("component", "")
    colour = PALETTE.get(comp, "white")

    # Colour tags must be in the template itself so loguru converts them.
    return (
        "{time:HH:mm:ss} | "
        f"<{colour}>{comp:<12}</> | "
        "<level>{message}</level>\n"
    )


def configure(level: str = "INFO") -> None:
    """Reinstall the stderr sink with a new default level."""
    global _default_level
    logger.level(level)  # raises ValueError for unknown levels
    _default_level = level
    logger.remove()
    logger.add(sys.stderr, format=formatter, filter=component_filter, colorize=True)


configure(_default_level)
