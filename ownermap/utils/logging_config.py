import sys
from pathlib import Path

from loguru import logger

from ownermap.utils.logging_utils import env_log_level


def configure_logger(log_file: str = "ownermap.log", level: str = "INFO", log_dir: str = "logs"):
    """
    Configure loguru for applications embedding the owner resolution engine.

    The engine itself never calls this on import.
    """
    log_path = Path(log_dir)
    log_path.mkdir(parents=True, exist_ok=True)

    # Remove default handler to avoid duplicate logs
    logger.remove()

    logger.add(
        sys.stderr,
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>",
        level=level,
    )

    logger.add(
        log_path / log_file,
        rotation="10 MB",
        retention="10 days",
        level=level,
        format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}",
        backtrace=True,
        diagnose=True,
    )


_configured = False


def setup_default_logging():
    global _configured
    if not _configured:
        configure_logger(level=env_log_level())
        _configured = True
