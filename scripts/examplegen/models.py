"""Data models for contract extraction and example generation."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class Difficulty(str, Enum):
    BEGINNER = "Beginner"
    INTERMEDIATE = "Intermediate"
    ADVANCED = "Advanced"


@dataclass(frozen=True)
class FunctionDescriptor:
    """One function declaration found by a textual scan of contract source."""

    name: str
    params: tuple[str, ...] = ()  # Display names, declaration order
    is_payable: bool = False
    is_view_or_pure: bool = False


@dataclass(frozen=True)
class ExampleEntry:
    """Catalog record for one example contract."""

    key: str  # "fhe-counter"
    title: str
    description: str
    contract: str  # Relative to repository root
    test: str  # Relative to repository root
    output: str  # Generated doc path, relative to repository root
    category: str  # "Basic" | "Access Control" | ...
    difficulty: Difficulty


@dataclass
class DocSection:
    """A doc-comment tag rendered as a README section."""

    title: str  # "Overview" | "Description" | "Technical Details"
    content: str


@dataclass(frozen=True)
class AbiParam:
    name: str
    type: str


@dataclass(frozen=True)
class AbiFunction:
    """Function entry from a compiled contract ABI."""

    name: str
    inputs: tuple[AbiParam, ...] = ()
    outputs: tuple[AbiParam, ...] = ()
    state_mutability: str = "nonpayable"

    @property
    def is_view(self) -> bool:
        return self.state_mutability in ("view", "pure")


@dataclass
class GenerationTally:
    """Results from a batch documentation run."""

    succeeded: list[str] = field(default_factory=list)  # Example keys
    failed: dict[str, str] = field(default_factory=dict)  # key -> error message
    total: int = 0

    @property
    def success_count(self) -> int:
        return len(self.succeeded)

    @property
    def error_count(self) -> int:
        return len(self.failed)
