"""Package metadata and pipeline configuration models."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Literal, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .steps import BuildStep, Concatenate, MinifyEach, PrependBanner

DEFAULT_BANNER = "/*! {name} {date} */\n"


class PackageMeta(BaseModel):
    """The subset of package.json read at startup."""

    model_config = ConfigDict(extra="allow", frozen=True)

    name: str = Field(min_length=1)
    version: Optional[str] = None
    assetpipe: Dict[str, Any] = Field(default_factory=dict)

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("name must not be blank")
        return v


class WatchOptions(BaseModel):
    """What to watch and how to react."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    files: Tuple[str, ...] = ("_assets/css/*.*",)
    debounce_ms: int = Field(default=50, ge=0)
    # Runs happen in-process; a change never forks a separate build.
    spawn: Literal[False] = False

    @field_validator("files")
    @classmethod
    def files_not_empty(cls, v: Tuple[str, ...]) -> Tuple[str, ...]:
        if not v:
            raise ValueError("at least one watch glob is required")
        return v


class PipelineConfig(BaseModel):
    """Immutable description of one pipeline invocation.

    Relative paths are interpreted against ``root``.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    root: Path = Field(default_factory=Path.cwd)
    package_name: str = Field(min_length=1)
    src_dir: Path = Path("_assets/css")
    src_glob: str = "*.css"
    dest_dir: Path = Path("css")
    ext: str = ".min.css"
    combine_glob: str = "*.min.css"
    combined: Path = Path("css/site.min.css")
    banner: str = DEFAULT_BANNER
    keep_bang_comments: bool = True
    watch: WatchOptions = Field(default_factory=WatchOptions)

    @field_validator("ext")
    @classmethod
    def ext_has_dot(cls, v: str) -> str:
        if not v.startswith(".") or len(v) < 2:
            raise ValueError("ext must start with '.'")
        return v

    @field_validator("src_glob", "combine_glob")
    @classmethod
    def glob_is_flat(cls, v: str) -> str:
        if "/" in v or "\\" in v:
            raise ValueError("globs are matched within a single directory")
        return v

    def resolve(self, path: Path | str) -> Path:
        """Return ``path`` anchored at ``root`` unless already absolute."""

        p = Path(path)
        return p if p.is_absolute() else self.root / p

    @property
    def src_path(self) -> Path:
        return self.resolve(self.src_dir)

    @property
    def dest_path(self) -> Path:
        return self.resolve(self.dest_dir)

    @property
    def combined_path(self) -> Path:
        return self.resolve(self.combined)

    def watch_globs(self) -> Tuple[str, ...]:
        return tuple(str(self.resolve(g)) for g in self.watch.files)

    def steps(self) -> Tuple[BuildStep, ...]:
        """The fixed, ordered build steps for this configuration."""

        return (
            MinifyEach(
                src_dir=self.src_path,
                src_glob=self.src_glob,
                dest_dir=self.dest_path,
                ext=self.ext,
            ),
            Concatenate(
                src_dir=self.dest_path,
                src_glob=self.combine_glob,
                dest=self.combined_path,
            ),
            PrependBanner(
                path=self.combined_path,
                template=self.banner,
                package_name=self.package_name,
            ),
        )


__all__ = ["DEFAULT_BANNER", "PackageMeta", "PipelineConfig", "WatchOptions"]
