"""
Unit tests for fretscope/config.py - defaults and YAML loading.
"""

import pytest
from pydantic import ValidationError

from fretscope.config import FretscopeConfig, load_config
from fretscope.errors import InvalidStyle
from fretscope.theory.notes import ScaleStyle


class TestDefaults:
    """Tests for FretscopeConfig defaults"""

    def test_defaults(self):
        """No file gives the built-in defaults"""
        config = load_config()
        assert config.max_fret == 16
        assert config.default_key == "C"
        assert config.use_sevenths is True

    def test_resolve_aliases(self):
        """UI style names map to scale styles"""
        config = FretscopeConfig()
        assert config.resolve_style("Pentatonic") is ScaleStyle.PENTATONIC_MAJOR
        assert config.resolve_style("Blues Pentatonic") is ScaleStyle.PENTATONIC_MINOR
        assert config.resolve_style("Diatonic") is ScaleStyle.MAJOR

    def test_resolve_raw_style(self):
        """Raw style names pass straight through"""
        assert FretscopeConfig().resolve_style("dorian") is ScaleStyle.DORIAN

    def test_resolve_unknown(self):
        """Unknown names raise InvalidStyle"""
        with pytest.raises(InvalidStyle):
            FretscopeConfig().resolve_style("Lydian Dominant")


class TestLoadConfig:
    """Tests for load_config()"""

    def test_yaml_overrides(self, tmp_path):
        """Values in the file replace defaults"""
        path = tmp_path / "fretscope.yaml"
        path.write_text("max_fret: 12\ndefault_key: A\ndefault_style: blues\n", encoding="utf-8")
        config = load_config(path)
        assert config.max_fret == 12
        assert config.default_key == "A"
        assert config.resolve_style(config.default_style) is ScaleStyle.BLUES

    def test_alias_overrides_merge(self, tmp_path):
        """New aliases are added next to the built-in ones"""
        path = tmp_path / "fretscope.yaml"
        path.write_text("style_aliases:\n  Jazz: dorian\n", encoding="utf-8")
        config = load_config(str(path))
        assert config.resolve_style("Jazz") is ScaleStyle.DORIAN
        assert config.resolve_style("Diatonic") is ScaleStyle.MAJOR

    def test_empty_file(self, tmp_path):
        """An empty file keeps the defaults"""
        path = tmp_path / "empty.yaml"
        path.write_text("", encoding="utf-8")
        assert load_config(path) == FretscopeConfig()

    def test_out_of_range(self, tmp_path):
        """max_fret above 24 is rejected"""
        path = tmp_path / "bad.yaml"
        path.write_text("max_fret: 30\n", encoding="utf-8")
        with pytest.raises(ValidationError):
            load_config(path)

    def test_bad_key(self):
        """Keys must be canonical note names"""
        with pytest.raises(ValidationError):
            FretscopeConfig(default_key="Bb")

    def test_bad_alias(self):
        """Aliases must point at real styles"""
        with pytest.raises(ValidationError):
            FretscopeConfig(style_aliases={"Weird": "nonsense"})

    def test_missing_file(self, tmp_path):
        """A missing file is an error"""
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "nope.yaml")


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
