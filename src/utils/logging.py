import logging
from typing import Optional
from colorama import Fore, Style, init

# Initialize colorama
init()


class ColoredFormatter(logging.Formatter):
    """Custom formatter that adds colors to log messages"""

    COLORS = {
        'DEBUG': Fore.BLUE,
        'INFO': Fore.GREEN,
        'WARNING': Fore.YELLOW,
        'ERROR': Fore.RED,
        'CRITICAL': Fore.RED + Style.BRIGHT
    }

    def format(self, record):
        # Colors the record in place; restored below so other handlers see the plain level name
        levelname = record.levelname
        if levelname in self.COLORS:
            record.levelname = f"{self.COLORS[levelname]}{levelname}{Style.RESET_ALL}"
        try:
            return super().format(record)
        finally:
            record.levelname = levelname


_console_handler: Optional[logging.Handler] = None


def setup_logging(log_level: str = 'INFO') -> None:
    """Configure logging with the specified level and colors"""
    global _console_handler
    numeric_level = getattr(logging, log_level.upper(), None)
    if not isinstance(numeric_level, int):
        raise ValueError(f'Invalid log level: {log_level}')

    # Create console handler with colored formatter
    console_handler = logging.StreamHandler()
    colored_formatter = ColoredFormatter(
        fmt='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )
    console_handler.setFormatter(colored_formatter)

    # Configure root logger
    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)
    if _console_handler is not None:
        root_logger.removeHandler(_console_handler)
    root_logger.addHandler(console_handler)
    _console_handler = console_handler
    logging.getLogger('pyarrow').setLevel(logging.WARNING)
    logging.getLogger('fsspec').setLevel(logging.WARNING)

def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get a logger for the specified module"""
    return logging.getLogger(name)
