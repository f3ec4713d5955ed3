from ownermap.utils.logging_config import configure_logger, setup_default_logging
from ownermap.utils.logging_utils import Timer, bind_context, env_log_level

__all__ = [
    "Timer",
    "bind_context",
    "configure_logger",
    "env_log_level",
    "setup_default_logging",
]
