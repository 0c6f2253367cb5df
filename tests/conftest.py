import pandas as pd
import pytest


def write_parquet(path, values, column="SOURCEURL", **extra_columns):
    df = pd.DataFrame({column: values, **extra_columns})
    df.to_parquet(path, engine="pyarrow", index=False)
    return str(path)


@pytest.fixture
def make_parquet(tmp_path):
    def _make(name, values, column="SOURCEURL", **extra_columns):
        return write_parquet(tmp_path / name, values, column=column, **extra_columns)
    return _make


@pytest.fixture
def example_dir(tmp_path):
    """Two overlapping files: 3 distinct URLs in total"""
    data_dir = tmp_path / "gdelt"
    data_dir.mkdir()
    write_parquet(data_dir / "a.parquet", ["http://x.com", "http://y.com"],
                  EventCode=[10, 20])
    write_parquet(data_dir / "b.parquet", ["http://y.com", "http://z.com"],
                  EventCode=[30, 40])
    return str(data_dir)


@pytest.fixture
def empty_dir(tmp_path):
    data_dir = tmp_path / "empty"
    data_dir.mkdir()
    (data_dir / "notes.txt").write_text("not parquet")
    return str(data_dir)
