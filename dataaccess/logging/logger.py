import sys
from pathlib import Path
from typing import Optional
from loguru import logger
from dataaccess.config import settings


class LogConfig:
    """Global logging configuration using Loguru."""
    @classmethod
    def setup_logging(cls, level: Optional[str] = None, to_file: Optional[bool] = None):
        level = level or settings.LOG_LEVEL
        to_file = settings.LOG_TO_FILE if to_file is None else to_file

        logger.remove()

        logger.add(
            sys.stdout,
            backtrace=True,
            diagnose=settings.DEBUG,
            format=(
                "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
                "<level>{level: <8}</level> | "
                "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
                "<magenta>Trace:{extra[trace_id]}</magenta> - <level>{message}</level>"
            ),
            level=level,
        )

        if to_file:
            log_dir = Path(settings.LOG_DIR)
            log_dir.mkdir(exist_ok=True)

            logger.add(
                log_dir / "dataaccess_{time:YYYY-MM-DD}.log",
                rotation="00:00",
                retention="30 days",
                compression="zip",
                format="{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{function}:{line} | Trace:{extra[trace_id]} - {message}",
                level="DEBUG",
            )

            logger.add(
                log_dir / "error_{time:YYYY-MM-DD}.log",
                level="ERROR",
                rotation="100 MB",
            )

        logger.configure(extra={"trace_id": "system"})


def get_logger(name: str = None, trace_id: Optional[str] = None):
    """Get logger instance; trace_id usually identifies the data access session."""
    trace_id = trace_id or "system"

    if name:
        return logger.bind(name=name, trace_id=trace_id)
    else:
        return logger.bind(trace_id=trace_id)
