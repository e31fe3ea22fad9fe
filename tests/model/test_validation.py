"""Tests for per-segment validation with comprehensive edge case coverage."""

import pytest

from crosspath.errors import InvalidPathError, PathValidationError
from crosspath.model.validation import (
    MAX_SEGMENT_LENGTH,
    is_reserved_name,
    validate_segment,
)


class TestAlwaysForbidden:
    """Rules applied on every profile."""

    def test_basic_valid_segments(self):
        """Test basic valid segment cases."""
        for strict in (False, True):
            assert validate_segment("file.txt", "p", strict=strict) == "file.txt"
            assert validate_segment("my-file_2.json", "p", strict=strict) == "my-file_2.json"
            assert validate_segment("IMG_001.JPG", "p", strict=strict) == "IMG_001.JPG"
            assert validate_segment("..", "p", strict=strict) == ".."
            assert validate_segment(".hidden", "p", strict=strict) == ".hidden"

    def test_length_constraints(self):
        """Test segment length limit."""
        ok = "a" * MAX_SEGMENT_LENGTH
        assert validate_segment(ok, "p", strict=False) == ok

        with pytest.raises(PathValidationError, match="path component too long: 256 > 255"):
            validate_segment("a" * 256, "p", strict=False)

    def test_nul_and_colon(self):
        """NUL and ':' are rejected even when not strict."""
        with pytest.raises(PathValidationError, match="forbidden character"):
            validate_segment("file\x00name", "p", strict=False)
        with pytest.raises(PathValidationError, match="forbidden character ':'"):
            validate_segment("a:b", "p", strict=False)

    def test_error_embeds_path(self):
        with pytest.raises(InvalidPathError) as excinfo:
            validate_segment("a:b", "/x/a:b", strict=False)
        assert excinfo.value.path == "/x/a:b"
        assert str(excinfo.value).endswith(": /x/a:b")


class TestStrictRules:
    """Rules applied in strict mode and on Windows."""

    @pytest.mark.parametrize("ch", ['"', "*", "<", ">", "?", "|", "\\", "\x01", "\x1f", "\x7f", "\t"])
    def test_forbidden_characters(self, ch):
        segment = f"a{ch}b"
        with pytest.raises(PathValidationError, match="forbidden character"):
            validate_segment(segment, "p", strict=True)
        # Allowed when not strict
        assert validate_segment(segment, "p", strict=False) == segment

    def test_reserved_windows_names(self):
        """Test Windows reserved device name rejection."""
        reserved_names = ["CON", "PRN", "AUX", "NUL", "COM0", "COM1", "COM9", "LPT0", "LPT1", "LPT9"]

        for name in reserved_names:
            # Test uppercase
            with pytest.raises(PathValidationError, match="reserved filename"):
                validate_segment(name, "p", strict=True)
            # Test lowercase
            with pytest.raises(PathValidationError, match="reserved filename"):
                validate_segment(name.lower(), "p", strict=True)
            # Test with extension
            with pytest.raises(PathValidationError, match="reserved filename"):
                validate_segment(f"{name}.txt", "p", strict=True)

        # Allowed when not strict
        assert validate_segment("CON", "p", strict=False) == "CON"
        assert validate_segment("con.txt", "p", strict=False) == "con.txt"

    def test_names_that_only_look_reserved(self):
        for name in ("CONSOLE", "COM10", "LPT", "xCON", "aux-file"):
            assert not is_reserved_name(name)
            assert validate_segment(name, "p", strict=True) == name

    def test_extension_split_uses_first_dot(self):
        assert is_reserved_name("con.tar.gz")
        assert not is_reserved_name(".con")
