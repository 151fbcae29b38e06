import logging
from rich.logging import RichHandler
from vocab_srs.config import settings


def setup_logging(level: str = None) -> None:
    """Route stdlib logging through rich so it sits alongside CLI console output."""
    logging.basicConfig(
        level=(level or settings.log_level).upper(),
        format="%(name)s: %(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
        force=True,
    )
