from .logger import LogConfig, get_logger

__all__ = ["LogConfig", "get_logger"]
