"""
Configuration for fretscope.

Defaults for the fretboard overlay live in FretscopeConfig. They can be
overridden from a YAML file:

    max_fret: 12
    default_key: A
    default_style: Blues Pentatonic
    style_aliases:
      Pentatonic: pentatonic-major

Usage:
    from fretscope.config import load_config

    config = load_config("fretscope.yaml")
    style = config.resolve_style("Diatonic")   # ScaleStyle.MAJOR
"""

import logging
from pathlib import Path
from typing import Dict, Optional, Union

import yaml
from pydantic import BaseModel, Field, field_validator, model_validator

from fretscope.data.schema import NOTE_NAMES
from fretscope.theory.notes import ScaleStyle, to_scale_style


logger = logging.getLogger(__name__)


# UI style names -> the scale actually drawn
DEFAULT_STYLE_ALIASES = {
    "Pentatonic": "pentatonic-major",
    "Blues Pentatonic": "pentatonic-minor",
    "Pentatonic +": "pentatonic-major",
    "Diatonic": "major",
}


class FretscopeConfig(BaseModel):
    """Tunable defaults for the fretboard overlay and tab navigation."""

    max_fret: int = Field(default=16, ge=0, le=24, description="Highest fret drawn and searched")
    default_key: str = Field(default="C", description="Key selected on startup")
    default_style: str = Field(default="Pentatonic", description="Style selected on startup")
    use_sevenths: bool = Field(default=True, description="Context chords default to seventh chords")
    style_aliases: Dict[str, str] = Field(default_factory=lambda: dict(DEFAULT_STYLE_ALIASES))

    @field_validator('default_key')
    @classmethod
    def validate_default_key(cls, v: str) -> str:
        if v not in NOTE_NAMES:
            raise ValueError(f"default_key must be one of {NOTE_NAMES}. Got: '{v}'")
        return v

    @field_validator('style_aliases')
    @classmethod
    def validate_style_aliases(cls, v: Dict[str, str]) -> Dict[str, str]:
        for alias, style in v.items():
            to_scale_style(style)
        return {**DEFAULT_STYLE_ALIASES, **v}

    @model_validator(mode="after")
    def validate_default_style(self) -> "FretscopeConfig":
        self.resolve_style(self.default_style)
        return self

    def resolve_style(self, name: str) -> ScaleStyle:
        """Map a UI style name or a raw scale style to a ScaleStyle."""
        return to_scale_style(self.style_aliases.get(name, name))


def load_config(path: Optional[Union[str, Path]] = None) -> FretscopeConfig:
    """
    Load configuration from a YAML file.

    Keys missing from the file keep their defaults. With no path the
    defaults are returned as-is.

    Raises:
        FileNotFoundError: path does not exist
        pydantic.ValidationError: a value is out of range
    """
    if path is None:
        return FretscopeConfig()

    path = Path(path)
    with path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise ValueError(f"Config file must hold a mapping. Got: {type(data).__name__}")

    config = FretscopeConfig(**data)
    logger.debug(f"Loaded config from {path}: {config.model_dump()}")
    return config
