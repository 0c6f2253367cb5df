from typing import Optional


class UrlCountError(Exception):
    """Base class for every failure that aborts a run"""


class IoError(UrlCountError):
    """A file could not be opened or a directory could not be listed"""


class MalformedFile(UrlCountError):
    """The Parquet decoder could not parse a file"""


class ColumnNotFound(UrlCountError):
    """The target column is missing from a file's schema"""

    def __init__(self, column: str, path: Optional[str] = None):
        self.column = column
        self.path = path
        where = f" in file: {path}" if path else ""
        super().__init__(f"{column} column not found{where}")


class InvalidInput(UrlCountError):
    """The input path is neither a regular file nor a directory"""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"{path} is neither a file nor a directory")
