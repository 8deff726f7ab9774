"""Context for passing state between commands."""

from pathlib import Path
from typing import Optional

import click

from .home import load_config
from .models import PipelineConfig


class AssetContext:
    def __init__(self):
        self.package: Optional[Path] = None
        self.root: Optional[Path] = None
        self._config: Optional[PipelineConfig] = None

    def config(self) -> PipelineConfig:
        """Load the pipeline configuration once per invocation."""
        if self._config is None:
            self._config = load_config(self.package, self.root)
        return self._config

    def display(self, path: Path) -> str:
        """Render ``path`` relative to the project root when possible."""
        root = (self.root or Path.cwd()).resolve()
        try:
            return str(path.relative_to(root))
        except ValueError:
            return str(path)


pass_context = click.make_pass_decorator(AssetContext, ensure=True)
