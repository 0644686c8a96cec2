import logging
from dataclasses import replace
from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel

from .config import ParserConfig

logger = logging.getLogger(__name__)


class ParserConfigFile(BaseModel):
    preset: Literal["gfm", "commonmark"] = "gfm"
    tables: bool | None = None
    strikethrough: bool | None = None
    autolinks: bool | None = None
    footnotes: bool | None = None
    task_lists: bool | None = None
    front_matter: bool | None = None
    html: bool | None = None

    class Config:
        extra = "forbid"

    def to_parser_config(self) -> ParserConfig:
        if self.preset == "commonmark":
            base = ParserConfig.commonmark()
        else:
            base = ParserConfig.gfm()
        overrides = self.model_dump(exclude={"preset"}, exclude_none=True)
        return replace(base, **overrides)


def load_parser_config(path: str | Path) -> ParserConfig:
    logger.info("Loading parser config from %s", path)
    with open(path) as f:
        data = yaml.safe_load(f) or {}
    config = ParserConfigFile.model_validate(data).to_parser_config()
    logger.debug("Loaded parser config: %s", config)
    return config
