from contextlib import contextmanager
from typing import Iterator, List, Optional, Sequence

import pandas as pd
import pyarrow as pa
import pyarrow.parquet as pq

from configs import BATCH_SIZE
from dataservice.errors import ColumnNotFound, IoError, MalformedFile
from utils.logging import get_logger

logger = get_logger(__name__)


class Extractor:
    """Static helpers that stream one string column out of a Parquet file"""

    @staticmethod
    @contextmanager
    def open_parquet(path: str) -> Iterator[pq.ParquetFile]:
        """Open `path` as a Parquet file; the handle is closed when the block exits.

        Raises IoError when the file cannot be opened and MalformedFile when the
        footer or schema cannot be decoded.
        """
        try:
            fh = open(path, "rb")
        except OSError as e:
            raise IoError(f"Cannot open {path}: {e}") from e
        with fh:
            try:
                parquet_file = pq.ParquetFile(fh)
            except (pa.ArrowException, OSError) as e:
                raise MalformedFile(f"Cannot decode Parquet file {path}: {e}") from e
            logger.debug(f"[+] Opened {path}: rows={parquet_file.metadata.num_rows}, "
                         f"row_groups={parquet_file.metadata.num_row_groups}")
            yield parquet_file

    @staticmethod
    def read_schema(parquet_file: pq.ParquetFile) -> List[str]:
        return list(parquet_file.schema_arrow.names)

    @staticmethod
    def locate_column(schema: Sequence[str], name: str, path: Optional[str] = None) -> int:
        """Position of the first field named exactly `name` (case-sensitive)."""
        for position, field in enumerate(schema):
            if field == name:
                return position
        raise ColumnNotFound(name, path)

    @staticmethod
    def extract_values(parquet_file: pq.ParquetFile, position: int,
                       batch_size: int = BATCH_SIZE) -> Iterator[str]:
        """Yield the string value of the column at `position` for each row.

        Nulls and values that do not decode to `str` (numbers, raw bytes) are
        skipped. Single forward pass; failures of the decoder surface as
        MalformedFile.
        """
        name = parquet_file.schema_arrow.names[position]
        try:
            batches = parquet_file.iter_batches(batch_size=batch_size, columns=[name])
        except (pa.ArrowException, OSError) as e:
            raise MalformedFile(f"Cannot read column {name}: {e}") from e

        while True:
            try:
                batch = next(batches)
            except StopIteration:
                return
            except (pa.ArrowException, OSError) as e:
                raise MalformedFile(f"Cannot read column {name}: {e}") from e

            column: pd.Series = batch.column(0).to_pandas()
            for value in column[column.notna()]:
                if isinstance(value, str):
                    yield value
