import logging
import os
import sys
from datetime import datetime
from logging import Logger
from colorama import init, Fore, Style
init(autoreset=True)

# Environment switches read once when the module is imported
LOG_FILE_ENV = "FREEBLOCK_LOG_FILE"
LOG_LEVEL_ENV = "FREEBLOCK_LOG_LEVEL"

LEVEL_MAP = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def create_log_directory(log_folder: str = None):
    """
    Ensures that the log directory exists. If not, it creates it.

    Args:
        log_folder: Optional path to log folder. If None, uses platform-specific location.
    """
    if log_folder is None:
        from freeblock.utils.paths import get_logs_dir
        log_folder = str(get_logs_dir())

    if not os.path.exists(log_folder):
        os.makedirs(log_folder)
    return log_folder

def get_log_file_path(log_folder: str) -> str:
    """
    Returns a log file path with a timestamp in the name.
    Format: logs/freeblock_YYYY-mm-dd_HHMMSS.log
    """
    timestamp = datetime.now().strftime("%Y-%m-%d_%H%M%S")
    return os.path.join(log_folder, f"freeblock_{timestamp}.log")

def purge_old_logs(log_folder: str, keep: int = 10):
    """
    Removes older log files, keeping only the most recent 'keep' files.
    Logs are named freeblock_YYYY-mm-dd_HHMMSS.log, so lexicographical
    sort matches chronological order.
    """
    all_logs = [f for f in os.listdir(log_folder)
                if f.startswith("freeblock_") and f.endswith(".log")]
    all_logs.sort()

    logs_to_remove = all_logs[:-keep] if keep > 0 else all_logs
    for old_file in logs_to_remove:
        os.remove(os.path.join(log_folder, old_file))

class ColorFormatter(logging.Formatter):
    """
    A formatter that colorizes log level names using colorama.
    """
    color_map = {
        logging.DEBUG: Fore.BLUE,
        logging.INFO: Fore.GREEN,
        logging.WARNING: Fore.YELLOW,
        logging.ERROR: Fore.RED,
        logging.CRITICAL: Fore.LIGHTRED_EX,
    }

    def format(self, record):
        color = self.color_map.get(record.levelno, Fore.WHITE)
        # Copy so file handlers never see the escape codes
        record = logging.makeLogRecord(record.__dict__)
        record.levelname = f"{color}{record.levelname}{Style.RESET_ALL}"
        return super().format(record)

def init_logger(
    name: str = "primary logger",
    log_folder: str = None,
    console_logging: bool = True,
    file_logging: bool = False,
    level: int = logging.DEBUG
) -> Logger:
    """
    Initializes and configures the logger with the specified settings.
    :param name: The logger's name.
    :param log_folder: The folder where log files should go. If None, uses platform-specific location.
    :param console_logging: Whether to log to the console.
    :param file_logging: Whether to log to a file.
    :param level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
    :return: A configured logger instance.
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)
    logger.propagate = False

    # Calling init_logger twice must not stack handlers
    if not logger.handlers:
        if file_logging:
            log_folder = create_log_directory(log_folder)
            purge_old_logs(log_folder, keep=10)
            file_handler = logging.FileHandler(get_log_file_path(log_folder), encoding="utf-8")
            file_handler.setLevel(level)
            file_handler.setFormatter(logging.Formatter(
                fmt="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S"
            ))
            logger.addHandler(file_handler)

        if console_logging:
            console_handler = logging.StreamHandler(sys.stdout)
            console_handler.setLevel(level)
            console_handler.setFormatter(ColorFormatter(
                fmt="%(asctime)s | %(levelname)s | %(message)s",
                datefmt="%H:%M:%S"
            ))
            logger.addHandler(console_handler)

    return logger


def _level_from_env(default: int = logging.INFO) -> int:
    value = os.environ.get(LOG_LEVEL_ENV, "")
    return LEVEL_MAP.get(value.upper(), default)


class Log:
    """
    Class-level logging facade (Log.info(...), Log.error(...)) over Python's logging.
    """
    _logger: Logger = init_logger(
        name="FreeBlockLogger",
        console_logging=True,
        file_logging=os.environ.get(LOG_FILE_ENV) == "1",
        level=_level_from_env()
    )

    @classmethod
    def get_logger(cls) -> Logger:
        return cls._logger

    @classmethod
    def set_level(cls, level: str | int):
        """
        Set the logging level dynamically.

        Args:
            level: Log level as string ("DEBUG", "INFO", "WARNING", "ERROR") or int
        """
        if isinstance(level, str):
            level = LEVEL_MAP.get(level.upper(), logging.INFO)

        cls._logger.setLevel(level)
        for handler in cls._logger.handlers:
            handler.setLevel(level)

    @classmethod
    def debug(cls, text: str):
        cls._logger.debug(text)

    @classmethod
    def info(cls, text: str):
        cls._logger.info(text)

    @classmethod
    def warning(cls, text: str, exc_info: bool = False):
        if exc_info:
            cls._logger.warning(text, exc_info=True)
        else:
            cls._logger.warning(text)

    @classmethod
    def error(cls, text: str, exc_info: bool = False):
        if exc_info:
            cls._logger.error(text, exc_info=True)
        else:
            cls._logger.error(text)
