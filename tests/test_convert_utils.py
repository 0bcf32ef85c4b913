"""
Tests for count/size formatting and human-readable size parsing.
"""
import pytest
from dupes.utils.convert_utils import ConvertUtils


class TestBytesToHuman:
    """Binary magnitude units with two decimals."""

    def test_small_values_in_bytes(self):
        assert ConvertUtils.bytes_to_human(0) == "0.00 bytes"
        assert ConvertUtils.bytes_to_human(1) == "1.00 bytes"
        assert ConvertUtils.bytes_to_human(1023) == "1023.00 bytes"

    def test_exactly_1024_stays_in_bytes(self):
        """Division happens only while the value is strictly above 1024."""
        assert ConvertUtils.bytes_to_human(1024) == "1024.00 bytes"

    def test_kilobytes_and_up(self):
        assert ConvertUtils.bytes_to_human(1536) == "1.50 KB"
        assert ConvertUtils.bytes_to_human(4096) == "4.00 KB"
        assert ConvertUtils.bytes_to_human(5 * 1024 ** 2) == "5.00 MB"
        assert ConvertUtils.bytes_to_human(3 * 1024 ** 3) == "3.00 GB"

    def test_caps_at_yottabytes(self):
        assert ConvertUtils.bytes_to_human(2048 * 1024 ** 8) == "2048.00 YB"

    def test_negative_values(self):
        assert ConvertUtils.bytes_to_human(-5) == "0.00 bytes"


class TestCountWithThousands:

    @pytest.mark.parametrize("count,expected", [
        (0, "0"),
        (7, "7"),
        (999, "999"),
        (1000, "1,000"),
        (123456, "123,456"),
        (1234567, "1,234,567"),
    ])
    def test_separators(self, count, expected):
        assert ConvertUtils.count_with_thousands(count) == expected


class TestHumanToBytes:
    """Test conversion from human-readable sizes (e.g., "500KB") to bytes."""

    def test_bytes_without_suffix(self):
        """Plain numbers should be interpreted as bytes."""
        assert ConvertUtils.human_to_bytes("0") == 0
        assert ConvertUtils.human_to_bytes("1") == 1
        assert ConvertUtils.human_to_bytes("1024") == 1024

    def test_suffixes(self):
        assert ConvertUtils.human_to_bytes("1B") == 1
        assert ConvertUtils.human_to_bytes("1K") == 1024
        assert ConvertUtils.human_to_bytes("1.5KB") == 1536
        assert ConvertUtils.human_to_bytes("1MB") == 1024 * 1024
        assert ConvertUtils.human_to_bytes("2G") == 2 * 1024 ** 3

    def test_case_and_whitespace(self):
        assert ConvertUtils.human_to_bytes(" 1kb ") == 1024

    def test_rejects_negative_values(self):
        with pytest.raises(ValueError, match="Negative size not allowed"):
            ConvertUtils.human_to_bytes("-1KB")
        with pytest.raises(ValueError, match="Negative size not allowed"):
            ConvertUtils.human_to_bytes("-5")

    def test_rejects_garbage(self):
        with pytest.raises(ValueError):
            ConvertUtils.human_to_bytes("lots")
