"""Per-example documentation and the category index.

Generates:
    docs/{category}/{key}.md  - One page per catalog entry (entry.output)
    docs/SUMMARY.md           - Category-grouped navigation
"""

from __future__ import annotations

import logging
import re
from pathlib import Path, PurePosixPath

from .catalog import Catalog, get_example, group_by_category, related_examples
from .errors import MissingFileError
from .extractors import read_contract_docs
from .models import GenerationTally

log = logging.getLogger(__name__)

RESOURCES = [
    "- [FHEVM Documentation](https://docs.zama.ai/fhevm)",
    "- [Hardhat Documentation](https://hardhat.org/docs)",
]
OPENZEPPELIN_RESOURCE = (
    "- [OpenZeppelin Confidential Contracts]"
    "(https://github.com/OpenZeppelin/openzeppelin-confidential-contracts)"
)


def _category_slug(category: str) -> str:
    return re.sub(r"\s+", "-", category.lower())


def _relative_link(path: str, base: str) -> str:
    """Path relative to ``base``, with forward slashes."""
    try:
        return str(PurePosixPath(path).relative_to(base))
    except ValueError:
        return path.replace("\\", "/")


def render_example_doc(
    catalog: Catalog, key: str, root: Path, require_source: bool = True
) -> str:
    """Generate the documentation page for one example.

    Args:
        catalog: Example catalog
        key: Entry to document
        root: Repository root that catalog paths are relative to
        require_source: Raise if the contract file is missing instead of
            documenting it without extracted sections

    Raises:
        UnknownExampleError: Key not in catalog
        MissingFileError: Contract missing and ``require_source`` set
    """
    entry = get_example(catalog, key)
    contract_path = root / entry.contract

    if require_source and not contract_path.exists():
        raise MissingFileError(entry.contract, "Contract")

    sections, functions = read_contract_docs(contract_path)

    lines = [
        f"# {entry.title}",
        "",
        "## Overview",
        "",
        entry.description,
        "",
    ]

    for section in sections:
        # The catalog description already serves as the overview
        if section.title == "Overview":
            continue
        lines.extend([f"## {section.title}", "", section.content, ""])

    lines.extend(
        [
            f"**Category**: {entry.category}  ",
            f"**Difficulty**: {entry.difficulty.value}",
            "",
        ]
    )

    if functions:
        lines.extend(["## Key Functions", ""])
        lines.extend(f"- `{name}()`" for name in functions)
        lines.append("")

    contract_file = PurePosixPath(entry.contract).name
    test_file = PurePosixPath(entry.test).name
    lines.extend(
        [
            "## Files",
            "",
            f"- **Contract**: [`{contract_file}`]({entry.contract})",
            f"- **Test**: [`{test_file}`]({entry.test})",
            "",
            "## Quick Start",
            "",
            "```bash",
            "# Compile contracts",
            "npx hardhat compile",
            "",
            "# Run tests",
            f"npx hardhat test {entry.test}",
            "",
            "# Generate standalone project",
            f"examplegen {key} ./output/{key}",
            "```",
            "",
        ]
    )

    related = related_examples(catalog, key)
    if related:
        lines.extend(["## Related Examples", ""])
        for other in related:
            slug = _category_slug(other.category)
            lines.append(f"- [{other.title}](../{slug}/{other.key}.md)")
        lines.append("")

    lines.extend(["## Resources", ""])
    lines.extend(RESOURCES)
    if entry.category == "OpenZeppelin":
        lines.append(OPENZEPPELIN_RESOURCE)
    lines.append("")

    return "\n".join(lines)


def render_summary_index(catalog: Catalog, docs_dir: str = "docs") -> str:
    """Generate SUMMARY.md navigation grouped by category."""
    lines = [
        "# Summary",
        "",
        "* [Introduction](README.md)",
        "",
    ]

    for category, entries in group_by_category(catalog).items():
        lines.extend([f"## {category}", ""])
        for entry in entries:
            lines.append(f"* [{entry.title}]({_relative_link(entry.output, docs_dir)})")
        lines.append("")

    return "\n".join(lines)


def generate_all_docs(
    catalog: Catalog, root: Path, require_sources: bool = True
) -> GenerationTally:
    """Write a page for every catalog entry, then the summary index.

    Entries are processed one at a time; a failure is logged and counted
    and the remaining entries still run.
    """
    tally = GenerationTally(total=len(catalog))

    for key, entry in catalog.items():
        try:
            output_path = root / entry.output
            page = render_example_doc(
                catalog, key, root, require_source=require_sources
            )
            output_path.parent.mkdir(parents=True, exist_ok=True)
            output_path.write_text(page, encoding="utf-8")
        except Exception as e:
            log.error("Error generating %s: %s", key, e)
            tally.failed[key] = str(e)
            continue

        log.info("Generated: %s", entry.output)
        tally.succeeded.append(key)

    summary_path = root / "docs" / "SUMMARY.md"
    summary_path.parent.mkdir(parents=True, exist_ok=True)
    summary_path.write_text(render_summary_index(catalog), encoding="utf-8")
    log.info("Generated summary index: docs/SUMMARY.md")

    log.info(
        "Summary: %d succeeded, %d failed, %d total",
        tally.success_count,
        tally.error_count,
        tally.total,
    )
    return tally
