import argparse

from configs import DEFAULT_LOG_LEVEL, PROGRAM_NAME, VERSION
from utils.logging import get_logger

logger = get_logger(__name__)

class BaseParser:
    def __init__(self, description: str, prog: str = PROGRAM_NAME):
        self.parser = argparse.ArgumentParser(prog=prog, description=description)
        self.parser.add_argument("--log-level", "-L", type=str, choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
                                 default=DEFAULT_LOG_LEVEL, help="Set the logging level")
        self.parser.add_argument("--version", action="version", version=f"%(prog)s {VERSION}")

    def add_argument(self, *args, **kwargs):
        self.parser.add_argument(*args, **kwargs)

    def parse_args(self, args=None):
        return self.parser.parse_args(args)
