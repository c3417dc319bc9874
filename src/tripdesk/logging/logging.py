# tripdesk/logging/logging.py
import json
import os
import logging
import sys
from pathlib import Path

# Loggers already configured by get_logger, keyed by name
_LOGGER_INITIALIZED = {}


def _resolve_log_dir(log_dir=None):
    if log_dir is not None:
        return Path(log_dir)
    return Path(os.environ.get("TRIPDESK_LOG_DIR", Path.home() / ".tripdesk" / "logs"))


def _resolve_log_file(log_file=None, log_dir=None):
    if log_file is not None:
        return Path(log_file)
    return _resolve_log_dir(log_dir) / "tripdesk.log"


def _resolve_level_file(level_file=None):
    if level_file is not None:
        return Path(level_file)
    override = os.environ.get("TRIPDESK_LOG_CONFIG", "").strip()
    if override:
        return Path(override).expanduser()
    config_dir = os.environ.get("TRIPDESK_CONFIG_DIR", "").strip()
    base = Path(config_dir).expanduser() if config_dir else Path.home() / ".tripdesk"
    return base / "logging.json"


def load_log_level(level_file=None):
    """Return the persisted numeric level, or None when nothing usable is stored."""

    try:
        stored = json.loads(_resolve_level_file(level_file).read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return None
    if not isinstance(stored, dict) or stored.get("log_level") is None:
        return None
    level = logging.getLevelName(str(stored["log_level"]).upper())
    return level if isinstance(level, int) else None


def save_log_level(level, level_file=None):
    """Persist ``level`` by name and return the file it was written to.

    Raises
    ------
    ValueError
        If ``level`` is not a standard logging level name.
    """

    name = str(level).upper()
    if not isinstance(logging.getLevelName(name), int):
        raise ValueError(f"Unknown logging level: {level!r}")
    path = _resolve_level_file(level_file)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps({"log_level": name}) + "\n", encoding="utf-8")
    return path


def get_logger(
    name="tripdesk",
    level=None,
    log_file=None,
    log_dir=None,
    console=True,
    filemode="a",
    fmt="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
    encoding="utf-8",
    propagate=False,
):
    """
    Get or create a logger with optional configuration.
    - name: Logger name (default 'tripdesk')
    - level: Logging level (default: persisted level, else logging.INFO)
    - log_file: File path for logs (default: <log_dir>/tripdesk.log)
    - log_dir: Directory for logs (default: ~/.tripdesk/logs)
    - console: If True, logs also go to stderr
    - filemode: File mode for log file ('a' append, 'w' overwrite)
    - fmt, datefmt: Formatting for log messages
    - encoding: Encoding for file log
    - propagate: Whether to propagate to root logger (default False)
    """
    logger = logging.getLogger(name)
    if not _LOGGER_INITIALIZED.get(name, False):
        if level is None:
            level = load_log_level() or logging.INFO
        file_path = _resolve_log_file(log_file, log_dir)
        file_path.parent.mkdir(parents=True, exist_ok=True)
        logger.setLevel(level)
        logger.propagate = propagate
        formatter = logging.Formatter(fmt=fmt, datefmt=datefmt)

        fh = logging.FileHandler(file_path, mode=filemode, encoding=encoding)
        fh.setFormatter(formatter)
        logger.addHandler(fh)

        if console:
            ch = logging.StreamHandler(sys.stderr)
            ch.setFormatter(formatter)
            logger.addHandler(ch)

        _LOGGER_INITIALIZED[name] = True

    return logger


def reset_logger(name=None):
    """Reset configured loggers so they can be reconfigured.

    Parameters
    ----------
    name : str, optional
        Name of the logger to reset. If omitted, all loggers tracked by
        :func:`get_logger` are reset.

    Examples
    --------
    >>> logger = get_logger("demo", level=logging.DEBUG)
    >>> reset_logger("demo")
    >>> logger = get_logger("demo", level=logging.INFO)
    """
    if name is None:
        names = list(_LOGGER_INITIALIZED.keys())
    else:
        names = [name]

    for n in names:
        logger = logging.getLogger(n)
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()

    if name is None:
        _LOGGER_INITIALIZED.clear()
    else:
        _LOGGER_INITIALIZED.pop(name, None)


def get_configured_level(name="tripdesk"):
    """Return the configured logging level name for ``name``."""

    level = logging.getLogger(name).getEffectiveLevel()
    return logging.getLevelName(level)


def short_id(value, length=8):
    """Return a loggable prefix of an opaque identifier."""

    if not value:
        return "<none>"
    return f"{value[:length]}..."
