from .logging import get_configured_level, get_logger, load_log_level, reset_logger, save_log_level

__all__ = ["get_logger", "reset_logger", "get_configured_level", "load_log_level", "save_log_level"]
