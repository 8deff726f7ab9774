"""The asset pipeline: minify each source, combine, prepend a banner."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Tuple

from .banner import render_banner
from .css import minify_file
from .log import get_logger
from .models import (
    STEP_NAMES,
    AssetIOError,
    BuildStep,
    Concatenate,
    ConfigError,
    MinifyEach,
    PipelineConfig,
    PrependBanner,
    SourceNotFound,
)

log = get_logger(__name__)


@dataclass(frozen=True)
class FileReport:
    """One file written by a step."""

    path: Path
    size: int
    source: Optional[Path] = None
    source_size: Optional[int] = None


@dataclass
class BuildResult:
    """Everything a run wrote, in the order it was written."""

    steps: List[str] = field(default_factory=list)
    files: List[FileReport] = field(default_factory=list)
    banner: Optional[str] = None

    @property
    def written(self) -> List[Path]:
        return [f.path for f in self.files]


def _matching(directory: Path, pattern: str) -> List[Path]:
    if not directory.is_dir():
        raise SourceNotFound(f"Source directory not found: {directory}")
    return sorted((p for p in directory.glob(pattern) if p.is_file()), key=lambda p: p.name)


def _write(path: Path, data: bytes) -> None:
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(data)
    except OSError as e:
        raise AssetIOError(path, e) from e


def _read(path: Path) -> bytes:
    try:
        return path.read_bytes()
    except OSError as e:
        raise AssetIOError(path, e) from e


def plan_outputs(step: MinifyEach, sources: Iterable[Path], reserved: Iterable[Path] = ()) -> List[Tuple[Path, Path]]:
    """Pair each source with its output path.

    Raises ConfigError when two sources land on the same output name (compared
    case-insensitively) or when an output would overwrite a reserved path.
    """
    taken: Dict[str, Path] = {}
    blocked = {str(p.resolve()).lower(): p for p in reserved}
    pairs = []
    for source in sources:
        dest = step.dest_dir / f"{source.stem}{step.ext}"
        key = str(dest.resolve()).lower()
        if key in taken:
            raise ConfigError(
                f"{source.name} and {taken[key].name} both minify to {dest.name}"
            )
        if key in blocked:
            raise ConfigError(
                f"{source.name} would minify onto the combined output {blocked[key]}"
            )
        taken[key] = source
        pairs.append((source, dest))
    return pairs


def minify_each(
    step: MinifyEach,
    keep_bang_comments: bool = True,
    reserved: Iterable[Path] = (),
) -> List[FileReport]:
    """Minify every matching source into its own output file.

    Every source is read and checked before the first output is written, so a
    syntax error leaves the destination untouched.
    """
    sources = _matching(step.src_dir, step.src_glob)
    if not sources:
        raise SourceNotFound(f"No files match {step.src_dir / step.src_glob}")

    pairs = plan_outputs(step, sources, reserved)

    rendered = []
    for source, dest in pairs:
        try:
            original = source.stat().st_size
            minified = minify_file(source, keep_bang_comments=keep_bang_comments)
        except OSError as e:
            raise AssetIOError(source, e) from e
        except UnicodeDecodeError as e:
            raise AssetIOError(source, OSError(str(e))) from e
        rendered.append((source, dest, original, minified.encode("utf-8")))

    reports = []
    for source, dest, original, data in rendered:
        _write(dest, data)
        log.info("minified %s -> %s (%d -> %d bytes)", source, dest, original, len(data))
        reports.append(FileReport(path=dest, size=len(data), source=source, source_size=original))
    return reports


def concatenate(step: Concatenate) -> FileReport:
    """Byte-concatenate the matching files, sorted by name, into ``step.dest``."""
    parts = [p for p in _matching(step.src_dir, step.src_glob) if p.resolve() != step.dest.resolve()]
    if not parts:
        raise SourceNotFound(f"No files match {step.src_dir / step.src_glob}")

    data = b"".join(_read(p) for p in parts)
    _write(step.dest, data)
    log.info("combined %d files into %s", len(parts), step.dest)
    return FileReport(path=step.dest, size=len(data))


def prepend_banner(step: PrependBanner, when: date) -> Tuple[str, FileReport]:
    """Write ``banner + content`` back to ``step.path``."""
    banner = render_banner(step.template, step.package_name, when)
    content = _read(step.path)
    data = banner.encode("utf-8") + content
    _write(step.path, data)
    log.info("added banner to %s", step.path)
    return banner, FileReport(path=step.path, size=len(data))


def run_default(
    config: PipelineConfig,
    when: date,
    only: Optional[Iterable[str]] = None,
) -> BuildResult:
    """Run the pipeline steps in their fixed order, stopping at the first error.

    Args:
        config: Pipeline configuration
        when: Date rendered into the banner
        only: Optional subset of step names (``minify``, ``combine``,
            ``banner``); order is always the pipeline's own

    Returns:
        BuildResult describing every file written
    """
    selected = set(STEP_NAMES if only is None else only)
    unknown = selected - set(STEP_NAMES)
    if unknown:
        raise ConfigError(f"Unknown step(s): {', '.join(sorted(unknown))}")

    result = BuildResult()
    for step in config.steps():
        if step.kind not in selected:
            continue
        log.debug("running step %s", step.kind)
        _run_step(step, config, when, result)
        result.steps.append(step.kind)
    return result


def _run_step(step: BuildStep, config: PipelineConfig, when: date, result: BuildResult) -> None:
    if isinstance(step, MinifyEach):
        result.files.extend(
            minify_each(
                step,
                keep_bang_comments=config.keep_bang_comments,
                reserved=[config.combined_path],
            )
        )
    elif isinstance(step, Concatenate):
        result.files.append(concatenate(step))
    elif isinstance(step, PrependBanner):
        banner, report = prepend_banner(step, when)
        result.banner = banner
        result.files.append(report)
    else:  # pragma: no cover - BuildStep is closed
        raise TypeError(f"Unsupported step: {step!r}")


__all__ = [
    "BuildResult",
    "FileReport",
    "concatenate",
    "minify_each",
    "plan_outputs",
    "prepend_banner",
    "run_default",
]
