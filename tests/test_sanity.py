"""
Test Suite - Basic Sanity Tests

These tests verify that the package structure is correct
and that basic imports work.

Run with: pytest tests/test_sanity.py -v
"""

import pytest


class TestPackageStructure:
    """Test that all packages can be imported."""

    def test_import_fretscope(self):
        """Test that main package can be imported."""
        import fretscope
        assert hasattr(fretscope, "__version__")
        assert fretscope.__version__ == "0.1.0"

    def test_import_data_package(self):
        """Test that data subpackage exposes its models."""
        import fretscope.data
        assert hasattr(fretscope.data, "TabPosition")

    def test_import_theory_package(self):
        """Test that theory subpackage exposes its query surface."""
        from fretscope.theory import (
            chord_function, chord_notes, key_function, scale_notes,
            scale_positions, seventh_chords_from_key,
        )

    def test_import_tab_package(self):
        """Test that tab subpackage exposes its parsing surface."""
        from fretscope.tab import (
            extract_tab_content, find_unique_character_positions,
            is_valid_tab_text, parse_notes_at_column, parse_tab,
        )


class TestErrorTaxonomy:
    """Errors are ValueErrors so callers can catch them broadly."""

    def test_theory_errors_are_value_errors(self):
        """InvalidRoot / InvalidStyle / InvalidVoicing subclass ValueError."""
        from fretscope.errors import InvalidRoot, InvalidString, InvalidStyle, InvalidVoicing, TheoryError
        for error in (InvalidRoot, InvalidStyle, InvalidVoicing, InvalidString):
            assert issubclass(error, TheoryError)
            assert issubclass(error, ValueError)

    def test_malformed_tab_has_user_message(self):
        """MalformedTab carries the message shown to the user."""
        from fretscope.errors import MalformedTab
        error = MalformedTab(reason="nothing found")
        assert "E|" in error.message
        assert error.reason == "nothing found"
        assert str(error) == error.message


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
