"""
Tests for document storage

JsonFileStorage runs against pytest's tmp_path; InMemoryStorage is
exercised directly.
"""

import pytest

from fintrack.ledger import LedgerStore
from fintrack.services.storage import (
    InMemoryStorage,
    JsonFileStorage,
    LoadResult,
    ParseError,
    StorageError,
)


class TestLoadResult:
    """Tests for the load outcome type."""

    def test_found(self):
        """Test a found value."""
        result = LoadResult(key="k", value=[1])
        assert result.ok and result.found
        assert result.unwrap_or([]) == [1]

    def test_missing(self):
        """Test that a missing document is not an error."""
        result = LoadResult(key="k")
        assert result.ok and not result.found
        assert result.unwrap_or("default") == "default"

    def test_corrupt(self):
        """Test that a parse error collapses to the default."""
        result = LoadResult(key="k", error=ParseError("k", "bad"))
        assert not result.ok
        assert result.unwrap_or(0) == 0

    def test_map_applies_to_found_values(self):
        """Test mapping a found value."""
        assert LoadResult(key="k", value=2).map(lambda v: v * 3).value == 6

    def test_map_turns_errors_into_parse_errors(self):
        """Test that a failing parser marks the result corrupt."""
        def parse(value):
            raise TypeError("not a list")

        result = LoadResult(key="k", value={}).map(parse)
        assert isinstance(result.error, ParseError)
        assert result.error.key == "k"
        assert "not a list" in result.error.reason

    def test_map_skips_missing(self):
        """Test that the parser is not called without a value."""
        result = LoadResult(key="k").map(lambda v: pytest.fail("should not be called"))
        assert result.ok and not result.found


class TestJsonFileStorage:
    """Tests for file-backed documents."""

    def test_round_trip(self, tmp_path):
        """Test that a saved document loads back."""
        storage = JsonFileStorage(tmp_path)
        storage.save("doc", {"a": [1, 2, "₹"]})
        assert storage.load("doc").value == {"a": [1, 2, "₹"]}
        assert storage.path_for("doc") == tmp_path / "doc.json"

    def test_creates_data_dir(self, tmp_path):
        """Test that a missing data directory is created on first write."""
        storage = JsonFileStorage(tmp_path / "nested" / "data")
        storage.save("doc", [])
        assert (tmp_path / "nested" / "data" / "doc.json").exists()

    def test_missing_document(self, tmp_path):
        """Test loading a key that was never written."""
        result = JsonFileStorage(tmp_path).load("nothing")
        assert result.ok and not result.found

    def test_blank_file_is_missing(self, tmp_path):
        """Test that an empty file counts as no document."""
        (tmp_path / "doc.json").write_text("  \n", encoding="utf-8")
        result = JsonFileStorage(tmp_path).load("doc")
        assert result.ok and not result.found

    def test_corrupt_document(self, tmp_path):
        """Test that invalid JSON is reported, not raised."""
        (tmp_path / "doc.json").write_text("{broken", encoding="utf-8")
        result = JsonFileStorage(tmp_path).load("doc")
        assert isinstance(result.error, ParseError)
        assert "invalid JSON" in result.error.reason

    def test_invalid_utf8_is_a_parse_error(self, tmp_path):
        """Test that undecodable bytes are reported, not raised."""
        (tmp_path / "doc.json").write_bytes(b'[{"id": 1, "category": "\xff\xfe"}]')
        result = JsonFileStorage(tmp_path).load("doc")
        assert isinstance(result.error, ParseError)
        assert "unreadable file" in result.error.reason

    def test_invalid_utf8_ledger_loads_empty(self, tmp_path):
        """Test that a ledger over undecodable bytes starts empty."""
        (tmp_path / "finance-mvc-transactions.json").write_bytes(
            b'[{"id": 1, "category": "\xff\xfe"}]'
        )
        assert LedgerStore(JsonFileStorage(tmp_path)).list() == []

    def test_load_or_default_reports_corruption(self, tmp_path):
        """Test that on_error sees the parse error and the default is returned."""
        (tmp_path / "doc.json").write_text("{broken", encoding="utf-8")
        errors = []
        value = JsonFileStorage(tmp_path).load_or_default("doc", list, [], on_error=errors.append)
        assert value == []
        assert len(errors) == 1 and errors[0].key == "doc"

    def test_no_temp_file_left_behind(self, tmp_path):
        """Test that the write goes through a temporary file."""
        JsonFileStorage(tmp_path).save("doc", [1])
        assert sorted(p.name for p in tmp_path.iterdir()) == ["doc.json"]

    def test_delete(self, tmp_path):
        """Test deleting present and missing documents."""
        storage = JsonFileStorage(tmp_path)
        storage.save("doc", 1)
        assert storage.delete("doc") is True
        assert storage.delete("doc") is False
        assert not storage.load("doc").found

    def test_unserializable_document(self, tmp_path):
        """Test that non-JSON values raise StorageError."""
        with pytest.raises(StorageError):
            JsonFileStorage(tmp_path).save("doc", {"when": object()})

    def test_write_failure_raises(self, tmp_path):
        """Test that an unwritable data directory raises StorageError."""
        blocker = tmp_path / "blocker"
        blocker.write_text("a file, not a directory", encoding="utf-8")
        with pytest.raises(StorageError):
            JsonFileStorage(blocker).save("doc", [])


class TestInMemoryStorage:
    """Tests for the in-memory backend."""

    def test_round_trip(self):
        """Test save and load."""
        storage = InMemoryStorage()
        storage.save("doc", {"x": 1})
        assert storage.load("doc").value == {"x": 1}
        assert storage.keys() == ["doc"]

    def test_corrupt_raw_value(self):
        """Test that a bad raw string is a parse error."""
        storage = InMemoryStorage()
        storage.set_raw("doc", "nope")
        assert isinstance(storage.load("doc").error, ParseError)

    def test_delete(self):
        """Test delete reports whether anything was removed."""
        storage = InMemoryStorage()
        storage.save("doc", 1)
        assert storage.delete("doc") is True
        assert storage.delete("doc") is False
