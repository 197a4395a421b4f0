import logging
import os


def configure_logging(verbosity: int = 0) -> None:
    """Configure the root logger on stderr; stdout is reserved for the map.

    WARNING by default, INFO with one -v, DEBUG with two or more.
    Respects DIGGER_LOG_LEVEL env var if present.
    """
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    level_name = os.getenv("DIGGER_LOG_LEVEL")
    if level_name:
        level = getattr(logging, level_name.upper(), level)
    logging.basicConfig(
        level=level,
        format="[%(asctime)s] %(levelname)s %(name)s: %(message)s",
    )
