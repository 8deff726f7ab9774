"""Home layer: locate package.json and turn it into a PipelineConfig."""

import json
import os
from datetime import date
from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import ValidationError

from .models import ConfigError, PackageMeta, PipelineConfig

PACKAGE_ENV = "ASSETPIPE_PACKAGE"


def resolve_package_path(
    cli_path: Optional[Path] = None, root: Optional[Path] = None
) -> Path:
    """
    Resolve package.json path with precedence:
    1. CLI --package path
    2. ASSETPIPE_PACKAGE env var
    3. <root>/package.json (root defaults to CWD)
    """
    if cli_path:
        return cli_path

    env = os.getenv(PACKAGE_ENV)
    if env:
        return Path(env).expanduser()

    return (root or Path.cwd()) / "package.json"


def load_json(path: Path) -> Dict[str, Any]:
    """Load and parse a JSON object, raising ConfigError on any failure."""
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        raise ConfigError(f"Package metadata not found: {path}") from None
    except json.JSONDecodeError as e:
        raise ConfigError(f"Malformed JSON in {path}: {e}") from None
    except UnicodeDecodeError as e:
        raise ConfigError(f"Cannot decode {path}: {e}") from None
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e.strerror or e}") from None
    if not isinstance(data, dict):
        raise ConfigError(f"Expected a JSON object in {path}")
    return data


def _describe(err: ValidationError) -> str:
    parts = []
    for item in err.errors():
        loc = ".".join(str(x) for x in item["loc"]) or "<root>"
        parts.append(f"{loc}: {item['msg']}")
    return "; ".join(parts)


def load_package(path: Path) -> PackageMeta:
    """Read and validate package metadata."""
    try:
        return PackageMeta.model_validate(load_json(path))
    except ValidationError as e:
        raise ConfigError(f"Invalid package metadata in {path}: {_describe(e)}") from None


def build_config(meta: PackageMeta, root: Path) -> PipelineConfig:
    """Combine package metadata and its optional ``assetpipe`` overrides."""
    data = dict(meta.assetpipe)
    for key in ("root", "package_name"):
        if key in data:
            raise ConfigError(f"'{key}' cannot be set in the assetpipe block")
    data.update(root=root, package_name=meta.name)
    try:
        return PipelineConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid assetpipe settings: {_describe(e)}") from None


def load_config(
    package: Optional[Path] = None, root: Optional[Path] = None
) -> PipelineConfig:
    """Resolve, read and validate configuration in one call."""
    root = (root or Path.cwd()).resolve()
    path = resolve_package_path(package, root)
    return build_config(load_package(path), root)


def today() -> date:
    """Current local date; the only place the pipeline reads the clock."""
    return date.today()
