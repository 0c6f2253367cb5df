import os
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Set, Tuple

from tqdm import tqdm

from configs import BATCH_SIZE, PARQUET_EXTENSION, TARGET_COLUMN
from dataservice.errors import InvalidInput, IoError
from dataservice.extractor import Extractor
from utils.logging import get_logger

logger = get_logger(__name__)


@dataclass
class FileStats:
    path: str
    values_seen: int
    new_unique: int


@dataclass
class RunSummary:
    # "file" or "directory"
    mode: str
    files_processed: int
    unique_count: int
    files: List[FileStats] = field(default_factory=list)


class UrlAggregator:
    """Accumulates the distinct values of one column across Parquet files.

    The unique set and the counters belong to this instance and only grow;
    reuse an instance to merge several inputs into one count. Any error from
    a file aborts the current call and leaves the set with whatever the
    earlier files contributed.
    """

    def __init__(self, column: str = TARGET_COLUMN, batch_size: int = BATCH_SIZE):
        self.column = column
        self.batch_size = batch_size
        self.unique_values: Set[str] = set()
        self.files_processed = 0
        self.file_stats: List[FileStats] = []

    @property
    def unique_count(self) -> int:
        return len(self.unique_values)

    def process_file(self, path: str) -> Tuple[int, int]:
        """Add the column values of one file; returns (new_unique, values_seen)."""
        initial_unique = len(self.unique_values)
        values_seen = 0
        with Extractor.open_parquet(path) as parquet_file:
            schema = Extractor.read_schema(parquet_file)
            logger.debug(f"[+] {path}: {len(schema)} fields")
            position = Extractor.locate_column(schema, self.column, path=path)
            for value in Extractor.extract_values(parquet_file, position, batch_size=self.batch_size):
                self.unique_values.add(value)
                values_seen += 1

        new_unique = len(self.unique_values) - initial_unique
        self.files_processed += 1
        self.file_stats.append(FileStats(path=path, values_seen=values_seen, new_unique=new_unique))
        logger.debug(f"[+] {path}: {values_seen} values, {new_unique} new unique")
        return new_unique, values_seen

    @staticmethod
    def list_parquet_files(path: str) -> List[str]:
        """Regular files in `path` whose extension is exactly the Parquet suffix, sorted by name.

        A bare `.parquet` has no extension and is skipped.
        """
        try:
            names = sorted(os.listdir(path))
        except OSError as e:
            raise IoError(f"Cannot list directory {path}: {e}") from e
        files = [
            os.path.join(path, name)
            for name in names
            if os.path.splitext(name)[1] == PARQUET_EXTENSION and os.path.isfile(os.path.join(path, name))
        ]
        logger.debug(f"[+] {path}: {len(files)} of {len(names)} entries are Parquet files")
        return files

    def process_directory(self, path: str, progress: bool = False,
                          on_file: Optional[Callable[[FileStats], None]] = None,
                          on_start: Optional[Callable[[str], None]] = None) -> Tuple[int, int]:
        """Process every Parquet file of `path`; returns (files_processed, total_unique).

        `on_start` gets each path before it is opened, `on_file` its stats once
        it is done. The first failing file aborts the scan.
        """
        files = self.list_parquet_files(path)
        processed = 0
        bar = tqdm(files, total=len(files), leave=False,
                   bar_format="{n_fmt}/{total_fmt}", disable=not progress or not files)
        with bar:
            for file_path in bar:
                if on_start is not None:
                    on_start(file_path)
                self.process_file(file_path)
                processed += 1
                if on_file is not None:
                    on_file(self.file_stats[-1])
        return processed, len(self.unique_values)

    def process_path(self, path: str, progress: bool = False,
                     on_file: Optional[Callable[[FileStats], None]] = None,
                     on_start: Optional[Callable[[str], None]] = None) -> RunSummary:
        if os.path.isfile(path):
            self.process_file(path)
            if on_file is not None:
                on_file(self.file_stats[-1])
            return RunSummary(mode="file", files_processed=1,
                              unique_count=len(self.unique_values), files=self.file_stats[-1:])
        if os.path.isdir(path):
            start = len(self.file_stats)
            processed, unique = self.process_directory(path, progress=progress,
                                                       on_file=on_file, on_start=on_start)
            return RunSummary(mode="directory", files_processed=processed,
                              unique_count=unique, files=self.file_stats[start:])
        raise InvalidInput(path)
