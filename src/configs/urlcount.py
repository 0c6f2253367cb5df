PROGRAM_NAME = "urlcount"
DESCRIPTION = "Counts unique URLs in GDELT Parquet files"
VERSION = "0.1.0"

# Column whose values are deduplicated; fixed by the GDELT export layout
TARGET_COLUMN = "SOURCEURL"

# Exact, case-sensitive suffix of files picked up from a directory
PARQUET_EXTENSION = ".parquet"

# Rows per record batch when streaming a column out of a file
BATCH_SIZE = 65_536

DEFAULT_LOG_LEVEL = "WARNING"
