"""Pydantic models for pipeline configuration and build steps."""

from .config import DEFAULT_BANNER, PackageMeta, PipelineConfig, WatchOptions
from .errors import (
    AssetIOError,
    BuildError,
    ConfigError,
    CssParseError,
    SourceNotFound,
)
from .steps import STEP_NAMES, BuildStep, Concatenate, MinifyEach, PrependBanner

__all__ = [
    "AssetIOError",
    "BuildError",
    "BuildStep",
    "Concatenate",
    "ConfigError",
    "CssParseError",
    "DEFAULT_BANNER",
    "MinifyEach",
    "PackageMeta",
    "PipelineConfig",
    "PrependBanner",
    "STEP_NAMES",
    "SourceNotFound",
    "WatchOptions",
]
