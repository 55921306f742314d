"""Exceptions raised by the example generators."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path


class ExamplegenError(Exception):
    """Base exception for examplegen operations."""

    pass


class UnknownExampleError(ExamplegenError):
    """Raised when a key is not present in the example catalog."""

    def __init__(self, key: str, available: Iterable[str]):
        self.key = key
        self.available = list(available)
        listing = "\n".join(f"  - {k}" for k in self.available)
        super().__init__(
            f"Unknown example: {key}\n\nAvailable examples:\n{listing}"
        )


class MissingFileError(ExamplegenError):
    """Raised when a contract, test or template path does not exist."""

    def __init__(self, path: str | Path, kind: str = "File"):
        self.path = str(path)
        self.kind = kind
        super().__init__(f"{kind} not found: {self.path}")


class DestinationExistsError(ExamplegenError):
    """Raised when the output directory for a new project already exists."""

    def __init__(self, path: str | Path):
        self.path = str(path)
        super().__init__(f"Output directory already exists: {self.path}")


class ContractNotFoundError(ExamplegenError):
    """Raised when source text has no contract declaration."""

    def __init__(self, origin: str | Path):
        self.origin = str(origin)
        super().__init__(f"Could not extract contract name from {self.origin}")


class TemplateError(ExamplegenError):
    """Raised when the project template lacks a file that gets rewritten."""

    pass


class SourceDecodeError(ExamplegenError):
    """Raised when a source file is not valid UTF-8 text."""

    def __init__(self, path: str | Path):
        self.path = str(path)
        super().__init__(f"Could not read {self.path}: not valid UTF-8 text")
