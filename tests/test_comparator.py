"""
Unit tests for ByteComparatorImpl.
Verifies byte-exact comparison, length mismatches, degenerate sizes and error handling.
"""
import io
import mmap
import pytest
from unittest import mock

from dupes.core.comparator import ByteComparatorImpl


def write(path, content: bytes) -> str:
    path.write_bytes(content)
    return str(path)


class TestByteComparatorImpl:
    """Test lock-step buffered comparison."""

    def test_default_buffer_is_page_size(self):
        assert ByteComparatorImpl().buffer_size == mmap.PAGESIZE

    def test_file_is_identical_to_itself(self, tmp_path):
        """Comparison must be reflexive."""
        path = write(tmp_path / "a.bin", b"some content" * 100)
        assert ByteComparatorImpl().identical(path, path) is True

    def test_identical_copies(self, tmp_path):
        content = bytes(range(256)) * 50
        a = write(tmp_path / "a.bin", content)
        b = write(tmp_path / "b.bin", content)
        assert ByteComparatorImpl().identical(a, b) is True

    def test_equal_size_different_content(self, tmp_path):
        """Files of equal size differing in a single byte are not identical."""
        content = bytearray(b"x" * 10000)
        a = write(tmp_path / "a.bin", bytes(content))
        content[7777] = ord("y")
        b = write(tmp_path / "b.bin", bytes(content))
        assert ByteComparatorImpl(buffer_size=1024).identical(a, b) is False

    def test_prefix_of_other_file_is_not_identical(self, tmp_path):
        """'abc' vs 'abcd': matching up to the shorter length is not enough."""
        a = write(tmp_path / "a.txt", b"abc")
        b = write(tmp_path / "b.txt", b"abcd")
        comparator = ByteComparatorImpl()
        assert comparator.identical(a, b) is False
        assert comparator.identical(b, a) is False

    def test_length_mismatch_on_chunk_boundary(self, tmp_path):
        """A file ending exactly on a buffer boundary vs. one with a trailing byte."""
        a = write(tmp_path / "a.bin", b"z" * 64)
        b = write(tmp_path / "b.bin", b"z" * 65)
        assert ByteComparatorImpl(buffer_size=32).identical(a, b) is False

    def test_multi_chunk_identical_with_short_last_read(self, tmp_path):
        content = b"0123456789" * 37  # 370 bytes: several full buffers plus a short one
        a = write(tmp_path / "a.bin", content)
        b = write(tmp_path / "b.bin", content)
        assert ByteComparatorImpl(buffer_size=16).identical(a, b) is True

    def test_empty_files_are_identical(self, tmp_path):
        a = write(tmp_path / "a.bin", b"")
        b = write(tmp_path / "b.bin", b"")
        assert ByteComparatorImpl().identical(a, b) is True

    def test_empty_vs_non_empty(self, tmp_path):
        a = write(tmp_path / "a.bin", b"")
        b = write(tmp_path / "b.bin", b"x")
        assert ByteComparatorImpl().identical(a, b) is False

    def test_missing_file_raises(self, tmp_path):
        a = write(tmp_path / "a.bin", b"x")
        with pytest.raises(OSError):
            ByteComparatorImpl().identical(a, str(tmp_path / "missing.bin"))

    def test_read_error_closes_both_handles(self, tmp_path):
        """A read failure must propagate and release both files."""

        class FailingReader(io.BytesIO):
            def read(self, *args):
                raise OSError("I/O error")

        good = io.BytesIO(b"data")
        bad = FailingReader(b"data")
        with mock.patch("builtins.open", side_effect=[good, bad]):
            with pytest.raises(OSError, match="I/O error"):
                ByteComparatorImpl().identical("a", "b")

        assert good.closed
        assert bad.closed
