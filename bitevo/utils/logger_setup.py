"""loguru sinks for BitEvo runs: stderr plus one rotating file per run."""

from datetime import datetime, timezone
import os
import sys

from loguru import logger

CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan> | "
    "<level>{message}</level>"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{function}:{line} | {message}"


def setup_logger(
    log_dir: str = "logs",
    level: str = "INFO",
    rotation: str = "50 MB",
    retention: str = "30 days",
    enable_colors: bool = True,
) -> str:
    """
    Replace loguru's default sink with a console sink and a run log file.

    Args:
        log_dir: Created if missing; receives ``run_<UTC timestamp>.log``
        level: Minimum level for both sinks
        rotation: Size or age after which the run log rolls over
        retention: How long rolled-over run logs are kept
        enable_colors: Colorize console output when stderr is a terminal

    Returns:
        Path of the run log file
    """
    os.makedirs(log_dir, exist_ok=True)
    stamp = datetime.now(timezone.utc).strftime("%Y%m%d_%H%M%S")
    log_file = os.path.join(log_dir, f"run_{stamp}.log")

    logger.remove()
    logger.add(
        sys.stderr,
        level=level,
        format=CONSOLE_FORMAT,
        colorize=enable_colors and sys.stderr.isatty(),
    )
    logger.add(
        log_file,
        level=level,
        format=FILE_FORMAT,
        rotation=rotation,
        retention=retention,
        encoding="utf-8",
    )

    logger.info("Run log: {}", log_file)
    return log_file
