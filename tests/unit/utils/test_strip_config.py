"""
Test cases for StripConfig.

Tests focus on defaults, flat keyword options and validation.
"""

import logging
import unittest

from jsoncomments.utils.config import (
    DEFAULT_CHUNK_SIZE,
    DecodeSettings,
    StreamSettings,
    StripConfig,
)


class TestStripConfig(unittest.TestCase):
    """Test configuration construction."""

    def test_defaults(self):
        """Test the default settings."""
        config = StripConfig()
        self.assertEqual(config.chunk_size, DEFAULT_CHUNK_SIZE)
        self.assertEqual(config.encoding, "utf-8")
        self.assertEqual(config.errors, "strict")
        self.assertIsNone(config.logger)

    def test_flat_options(self):
        """Test the flat keyword shortcuts."""
        config = StripConfig(chunk_size=64, encoding="latin-1", errors="replace")
        self.assertEqual(config.stream, StreamSettings(chunk_size=64))
        self.assertEqual(config.decode, DecodeSettings("latin-1", "replace"))

    def test_nested_settings_take_precedence(self):
        """Test that explicit settings groups are used as given."""
        stream = StreamSettings(chunk_size=3)
        config = StripConfig(stream=stream, chunk_size=99)
        self.assertIs(config.stream, stream)
        self.assertEqual(config.chunk_size, 3)

    def test_invalid_chunk_size(self):
        """Test that chunk sizes must be positive."""
        for size in (0, -1):
            with self.subTest(size=size):
                with self.assertRaises(ValueError):
                    StripConfig(chunk_size=size)

    def test_unknown_encoding(self):
        """Test that unknown encodings are rejected early."""
        with self.assertRaises(ValueError):
            StripConfig(encoding="no-such-codec")

    def test_ascii_incompatible_encoding(self):
        """Test that encodings that change the delimiter bytes are rejected."""
        for encoding in ("utf-16", "utf-32", "cp500"):
            with self.subTest(encoding=encoding):
                with self.assertRaises(ValueError):
                    StripConfig(encoding=encoding)

    def test_multibyte_encodings_rejected(self):
        """Test that codecs whose trail bytes can look like '\\' are rejected."""
        for encoding in ("shift_jis", "cp932", "gbk", "big5"):
            with self.subTest(encoding=encoding):
                with self.assertRaises(ValueError):
                    StripConfig(encoding=encoding)

    def test_byte_safe_encodings_accepted(self):
        """Test the single-byte and UTF-8 codec families."""
        for encoding in ("utf-8", "UTF8", "ascii", "latin-1", "iso-8859-15", "cp1252"):
            with self.subTest(encoding=encoding):
                self.assertEqual(StripConfig(encoding=encoding).encoding, encoding)

    def test_unknown_option(self):
        """Test that misspelled options are not silently ignored."""
        with self.assertRaises(TypeError):
            StripConfig(chunksize=10)

    def test_get_logger(self):
        """Test logger selection."""
        custom = logging.getLogger("custom")
        self.assertIs(StripConfig(logger=custom).get_logger("x"), custom)
        self.assertIs(StripConfig().get_logger("x"), logging.getLogger("x"))


if __name__ == "__main__":
    unittest.main()
