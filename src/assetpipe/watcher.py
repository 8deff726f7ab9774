"""Watch mode: re-run the pipeline when source files change.

Runs happen in the watching thread. While a run is in progress watchfiles
keeps collecting filesystem events and hands them over as a single batch once
the run returns, so any number of edits made during a run lead to exactly one
follow-up run.
"""

from __future__ import annotations

from pathlib import Path, PurePath
from typing import Callable, Iterable, Optional, Sequence, Set, Tuple

import watchfiles
from watchfiles import Change

from .log import get_logger
from .models import BuildError, PipelineConfig

log = get_logger(__name__)

ChangeBatch = Iterable[Tuple[Change, str]]

_MAGIC = set("*?[")


class GlobFilter:
    """watchfiles filter accepting paths that match any configured glob."""

    def __init__(self, globs: Sequence[str]):
        self.globs = tuple(globs)

    def __call__(self, change: Change, path: str) -> bool:
        p = PurePath(path)
        return any(p.match(g) for g in self.globs)

    def __repr__(self) -> str:
        return f"GlobFilter({list(self.globs)!r})"


def watch_roots(globs: Iterable[str]) -> Tuple[Path, ...]:
    """Return the directories to hand to the OS watcher.

    Each glob is cut at its first wildcard component and then walked up to the
    nearest existing directory, so a source directory that does not exist yet
    is picked up once it is created.
    """
    roots: Set[Path] = set()
    for glob in globs:
        base = Path(glob)
        while _MAGIC & set(base.name) or not base.is_dir():
            if base.parent == base:
                break
            base = base.parent
        roots.add(base)
    # Nested roots would deliver the same event twice
    ordered = sorted(roots, key=lambda p: len(p.parts))
    kept: list[Path] = []
    for root in ordered:
        if not any(root.is_relative_to(k) for k in kept):
            kept.append(root)
    return tuple(kept)


def _describe(batch: Sequence[Tuple[Change, str]]) -> str:
    names = sorted({Path(p).name for _, p in batch})
    return ", ".join(names)


def watch(
    config: PipelineConfig,
    build: Callable[[], object],
    *,
    changes: Optional[Iterable[ChangeBatch]] = None,
    stop_event=None,
    on_change: Optional[Callable[[str], None]] = None,
    on_error: Optional[Callable[[BuildError], None]] = None,
) -> int:
    """Run ``build`` once, then again after every relevant batch of changes.

    Args:
        config: Pipeline configuration providing the watch globs and debounce
        build: Zero-argument callable performing one pipeline run
        changes: Iterable of change batches; defaults to ``watchfiles.watch``
        stop_event: Optional event whose ``is_set()`` ends the loop
        on_change: Called with a short description before each re-run
        on_error: Called with each BuildError; the loop keeps watching

    Returns:
        Number of runs performed, including the initial one
    """
    globs = config.watch_globs()
    accept = GlobFilter(globs)

    if changes is None:
        roots = watch_roots(globs)
        log.info("watching %s for %s", ", ".join(map(str, roots)), ", ".join(globs))
        changes = watchfiles.watch(
            *roots,
            watch_filter=accept,
            debounce=config.watch.debounce_ms,
            stop_event=stop_event,
            raise_interrupt=False,
        )

    runs = 0

    def run_once() -> None:
        nonlocal runs
        runs += 1
        try:
            build()
        except BuildError as e:
            log.error("build failed: %s", e)
            if on_error is not None:
                on_error(e)

    try:
        run_once()
        for batch in changes:
            relevant = [(c, p) for c, p in batch if accept(c, p)]
            if not relevant:
                continue
            log.info("%d change(s) detected", len(relevant))
            if on_change is not None:
                on_change(_describe(relevant))
            run_once()
            if stop_event is not None and stop_event.is_set():
                break
    except KeyboardInterrupt:
        log.info("watch interrupted")

    return runs


__all__ = ["GlobFilter", "watch", "watch_roots"]
