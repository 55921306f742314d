"""Pattern-based extractors for Solidity source and compiled artifacts.

These are lexical scans, not a grammar. They are good enough for the
example contracts and deliberately stay that way.
"""

from __future__ import annotations

import json
import logging
import re
from pathlib import Path

from .errors import SourceDecodeError
from .models import AbiFunction, AbiParam, DocSection, FunctionDescriptor

log = logging.getLogger(__name__)

# function name(params) [visibility] [modifiers] [returns (...)] {
_FUNCTION_RE = re.compile(
    r"function\s+(\w+)\s*\(([^)]*)\)\s*([^{]*)\{", re.MULTILINE
)

# Narrower form used for documentation: visibility must directly follow params
_PUBLIC_FUNCTION_RE = re.compile(r"function\s+(\w+)\s*\([^)]*\)\s*(?:external|public)")

_CONTRACT_RE = re.compile(r"contract\s+(\w+)(?:\s+is\s+|\s*\{)")
_ANCHORED_CONTRACT_RE = re.compile(
    r"^\s*contract\s+(\w+)(?:\s+is\s+|\s*\{)", re.MULTILINE
)

# tag -> section title
_DOC_TAGS = (
    ("title", "Overview"),
    ("notice", "Description"),
    ("dev", "Technical Details"),
)


def _param_names(params: str) -> tuple[str, ...]:
    """Take the last token of each comma-separated parameter."""
    names = []
    for part in params.split(","):
        part = part.strip()
        if not part:
            continue
        names.append(part.split()[-1])
    return tuple(names)


def extract_functions(source: str) -> list[FunctionDescriptor]:
    """Extract externally callable function declarations in source order.

    Constructors and declarations whose modifier region mentions
    ``internal`` or ``private`` are skipped.

    Known limitations:
        - A parameter without a name ("uint256") reuses its type token as
          the display name.
        - Parameter types containing parentheses cut the parameter list
          short and mis-extract the declaration.
        - Body-less declarations (interfaces, abstract functions) run on to
          the next ``{`` and contribute their text to its modifier region.
    """
    functions: list[FunctionDescriptor] = []

    for match in _FUNCTION_RE.finditer(source):
        name, params, modifiers = match.groups()

        if name == "constructor" or "internal" in modifiers or "private" in modifiers:
            continue

        functions.append(
            FunctionDescriptor(
                name=name,
                params=_param_names(params),
                is_payable="payable" in modifiers,
                is_view_or_pure="view" in modifiers or "pure" in modifiers,
            )
        )

    return functions


def read_source(path: Path) -> str:
    """Read a source file as UTF-8 text.

    Raises:
        SourceDecodeError: If the bytes do not decode as UTF-8
    """
    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise SourceDecodeError(path) from e


def extract_contract_name(source: str, anchored: bool = False) -> str | None:
    """Return the first declared contract name, or None.

    With ``anchored`` the declaration must start its line, so a mention of
    ``contract Foo {`` inside a trailing comment is not picked up.
    """
    pattern = _ANCHORED_CONTRACT_RE if anchored else _CONTRACT_RE
    match = pattern.search(source)
    return match.group(1) if match else None


def _extract_tag(source: str, tag: str) -> str:
    """Extract the rest of the line after the first @-tag."""
    match = re.search(rf"@{re.escape(tag)}\s+(.+)", source)
    if not match:
        return ""
    return match.group(1).strip()


def extract_doc_sections(source: str) -> list[DocSection]:
    """Extract @title, @notice and @dev natspec tags as README sections."""
    sections = []
    for tag, title in _DOC_TAGS:
        content = _extract_tag(source, tag)
        if content:
            sections.append(DocSection(title=title, content=content))
    return sections


def extract_public_function_names(source: str) -> list[str]:
    """Names of functions declared ``external`` or ``public``.

    Names starting with an underscore are treated as internal helpers.
    """
    return [
        m.group(1)
        for m in _PUBLIC_FUNCTION_RE.finditer(source)
        if not m.group(1).startswith("_")
    ]


def read_contract_docs(contract_path: Path) -> tuple[list[DocSection], list[str]]:
    """Read a contract and return its doc sections and public function names.

    A missing file is reported and yields empty results.
    """
    if not contract_path.exists():
        log.warning("Contract not found: %s", contract_path)
        return [], []

    content = read_source(contract_path)
    return extract_doc_sections(content), extract_public_function_names(content)


def _abi_params(items) -> tuple[AbiParam, ...]:
    return tuple(
        AbiParam(name=p.get("name", ""), type=p.get("type", "")) for p in items or []
    )


def extract_abi_functions(artifact_path: Path) -> list[AbiFunction]:
    """Extract function entries from a compiled Hardhat artifact."""
    if not artifact_path.exists():
        log.warning("ABI not found: %s", artifact_path)
        return []

    artifact = json.loads(artifact_path.read_text(encoding="utf-8"))
    abi = artifact.get("abi") or []

    return [
        AbiFunction(
            name=item["name"],
            inputs=_abi_params(item.get("inputs")),
            outputs=_abi_params(item.get("outputs")),
            state_mutability=item.get("stateMutability") or "nonpayable",
        )
        for item in abi
        if item.get("type") == "function"
    ]
