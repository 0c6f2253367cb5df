from .urlcount import (
    BATCH_SIZE,
    DEFAULT_LOG_LEVEL,
    DESCRIPTION,
    PARQUET_EXTENSION,
    PROGRAM_NAME,
    TARGET_COLUMN,
    VERSION,
)

__all__ = [
    "BATCH_SIZE",
    "DEFAULT_LOG_LEVEL",
    "DESCRIPTION",
    "PARQUET_EXTENSION",
    "PROGRAM_NAME",
    "TARGET_COLUMN",
    "VERSION",
]
