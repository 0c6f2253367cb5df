import pytest

from dataservice.errors import ColumnNotFound, IoError, MalformedFile
from dataservice.extractor import Extractor


def extract_all(path, column="SOURCEURL", batch_size=1024):
    with Extractor.open_parquet(path) as parquet_file:
        schema = Extractor.read_schema(parquet_file)
        position = Extractor.locate_column(schema, column, path=path)
        return list(Extractor.extract_values(parquet_file, position, batch_size=batch_size))


class TestLocateColumn:
    def test_returns_position(self):
        assert Extractor.locate_column(["GLOBALEVENTID", "SQLDATE", "SOURCEURL"], "SOURCEURL") == 2

    def test_first_match_wins(self):
        assert Extractor.locate_column(["SOURCEURL", "x", "SOURCEURL"], "SOURCEURL") == 0

    def test_match_is_case_sensitive(self):
        with pytest.raises(ColumnNotFound):
            Extractor.locate_column(["sourceurl", "SourceUrl"], "SOURCEURL")

    def test_error_names_column_and_file(self):
        with pytest.raises(ColumnNotFound) as exc:
            Extractor.locate_column([], "SOURCEURL", path="/data/a.parquet")
        assert exc.value.column == "SOURCEURL"
        assert "SOURCEURL column not found in file: /data/a.parquet" in str(exc.value)


    def test_error_without_path(self):
        with pytest.raises(ColumnNotFound) as exc:
            Extractor.locate_column(["URL"], "SOURCEURL")
        assert exc.value.path is None
        assert str(exc.value) == "SOURCEURL column not found"


class TestReadSchema:
    def test_top_level_names_in_order(self, make_parquet):
        path = make_parquet("a.parquet", ["http://x.com"], GLOBALEVENTID=[1])
        with Extractor.open_parquet(path) as parquet_file:
            assert Extractor.read_schema(parquet_file) == ["SOURCEURL", "GLOBALEVENTID"]


class TestExtractValues:
    def test_yields_every_row_including_duplicates(self, make_parquet):
        path = make_parquet("a.parquet", ["http://x.com", "http://x.com", "http://y.com"])
        assert extract_all(path) == ["http://x.com", "http://x.com", "http://y.com"]

    def test_null_values_are_skipped(self, make_parquet):
        path = make_parquet("a.parquet", ["http://x.com", None, "http://y.com", None])
        assert extract_all(path) == ["http://x.com", "http://y.com"]

    def test_all_null_column_yields_nothing(self, make_parquet):
        path = make_parquet("a.parquet", [None, None])
        assert extract_all(path) == []

    def test_non_string_values_are_skipped(self, make_parquet):
        path = make_parquet("ints.parquet", [1, 2, None])
        assert extract_all(path) == []

    def test_binary_values_are_skipped(self, make_parquet):
        path = make_parquet("bytes.parquet", [b"http://x.com", b"http://y.com"])
        assert extract_all(path) == []

    def test_reads_across_batches(self, make_parquet):
        urls = [f"http://site{i}.com" for i in range(25)]
        path = make_parquet("a.parquet", urls)
        assert extract_all(path, batch_size=4) == urls

    def test_single_forward_pass(self, make_parquet):
        path = make_parquet("a.parquet", ["http://x.com"])
        with Extractor.open_parquet(path) as parquet_file:
            values = Extractor.extract_values(parquet_file, 0)
            assert list(values) == ["http://x.com"]
            assert list(values) == []

    def test_only_target_column_is_read(self, make_parquet):
        path = make_parquet("a.parquet", ["http://x.com"], Actor1Name=["USA"])
        with Extractor.open_parquet(path) as parquet_file:
            assert list(Extractor.extract_values(parquet_file, 1)) == ["USA"]


class TestOpenParquet:
    def test_missing_file_is_io_error(self, tmp_path):
        with pytest.raises(IoError):
            with Extractor.open_parquet(str(tmp_path / "missing.parquet")):
                pass

    def test_directory_is_io_error(self, tmp_path):
        with pytest.raises(IoError):
            with Extractor.open_parquet(str(tmp_path)):
                pass

    def test_garbage_file_is_malformed(self, tmp_path):
        path = tmp_path / "bad.parquet"
        path.write_text("SOURCEURL\nhttp://x.com\n")
        with pytest.raises(MalformedFile):
            with Extractor.open_parquet(str(path)):
                pass

    def test_empty_file_is_malformed(self, tmp_path):
        path = tmp_path / "empty.parquet"
        path.write_bytes(b"")
        with pytest.raises(MalformedFile):
            with Extractor.open_parquet(str(path)):
                pass
