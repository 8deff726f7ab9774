"""Build step definitions."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class MinifyEach(BaseModel):
    """Minify every source file into ``dest_dir/<stem><ext>``."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["minify"] = "minify"
    src_dir: Path
    src_glob: str
    dest_dir: Path
    ext: str


class Concatenate(BaseModel):
    """Join the minified files into the combined output."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["combine"] = "combine"
    src_dir: Path
    src_glob: str
    dest: Path


class PrependBanner(BaseModel):
    """Prepend the rendered banner to the combined output in place."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["banner"] = "banner"
    path: Path
    template: str
    package_name: str


BuildStep = Annotated[
    Union[MinifyEach, Concatenate, PrependBanner],
    Field(discriminator="kind"),
]

STEP_NAMES = ("minify", "combine", "banner")


__all__ = ["STEP_NAMES", "BuildStep", "Concatenate", "MinifyEach", "PrependBanner"]
