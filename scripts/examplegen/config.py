"""Runtime settings, read from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

DEFAULT_TEMPLATE_DIR = "fhevm-hardhat-template"
DEFAULT_FRONTEND_DIR = "frontend-template"

# Generated or dependency directories never copied out of a template
EXCLUDED_DIRS = frozenset(
    {"node_modules", "artifacts", "cache", "coverage", "types", "dist"}
)


@dataclass
class Settings:
    """Where the example repository and its templates live.

    Catalog paths (contracts, tests, docs) are relative to ``root``.
    """

    root: Path
    template_dir: Path
    frontend_dir: Path
    output_base: Path
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, root: str | Path | None = None) -> Settings:
        """Build settings from EXAMPLEGEN_* variables.

        Args:
            root: Repository root; overrides EXAMPLEGEN_ROOT when given
        """
        base = Path(root or os.environ.get("EXAMPLEGEN_ROOT", ".")).resolve()

        def resolve(value: str) -> Path:
            path = Path(value)
            return path if path.is_absolute() else base / path

        template_dir = os.environ.get("EXAMPLEGEN_TEMPLATE_DIR", DEFAULT_TEMPLATE_DIR)
        frontend_dir = os.environ.get("EXAMPLEGEN_FRONTEND_DIR", DEFAULT_FRONTEND_DIR)

        return cls(
            root=base,
            template_dir=resolve(template_dir),
            frontend_dir=resolve(frontend_dir),
            output_base=Path.cwd() / "output",
            log_level=os.environ.get("EXAMPLEGEN_LOG_LEVEL", "INFO").upper(),
        )
