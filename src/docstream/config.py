# src/docstream/config.py

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, Field, field_validator

logger = logging.getLogger(__name__)


class ParserConfig(BaseModel):
    """Markers recognised by the stream parser.

    Immutable. No magic defaults from environment.
    """

    separator: str = Field(default="---", min_length=1)
    comment_marker: str = Field(default="#", min_length=1)

    class Config:
        extra = "forbid"
        frozen = True

    @field_validator("separator", "comment_marker")
    @classmethod
    def check_single_line(cls, value: str) -> str:
        if "\n" in value or "\r" in value:
            raise ValueError("markers must not contain line breaks")
        return value

    @classmethod
    def from_yaml(cls, path: str | Path) -> "ParserConfig":
        logger.info("Loading parser config from: %s", path)
        with open(path) as f:
            data = yaml.safe_load(f)
        return cls.model_validate(data or {})
