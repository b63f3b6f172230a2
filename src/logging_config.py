import logging
import logging.handlers
from pathlib import Path
from typing import Optional

from src.draft_luck.config import LOG_DIR

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(
    log_level: str = "INFO",
    log_dir: Optional[Path] = None,
    log_to_file: bool = True,
) -> None:
    """Configure root logging for the draft luck statistics runner.

    Console output uses *log_level*; the rotating log file (when enabled)
    always records DEBUG so per-member scoring detail is kept.
    """
    root_logger = logging.getLogger()
    if root_logger.handlers:
        return  # Already configured

    level = getattr(logging, log_level.upper(), logging.INFO)
    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_to_file:
        log_dir = Path(log_dir) if log_dir is not None else LOG_DIR
        log_dir.mkdir(parents=True, exist_ok=True)

        # 5MB max, keep 3 backups
        file_handler = logging.handlers.RotatingFileHandler(
            log_dir / "draft_luck.log", maxBytes=5 * 1024 * 1024, backupCount=3
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)
        root_logger.setLevel(logging.DEBUG)
    else:
        root_logger.setLevel(level)

    logging.getLogger(__name__).info("Logging initialized (level=%s)", log_level)
