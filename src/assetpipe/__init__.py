"""assetpipe: minify, combine and banner CSS assets, once or on every change."""

from .models import BuildError, PipelineConfig
from .pipeline import BuildResult, run_default

__all__ = ["__version__", "BuildError", "BuildResult", "PipelineConfig", "run_default"]

__version__ = "0.1.0"
