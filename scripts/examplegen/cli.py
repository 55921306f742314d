"""Command-line entry points.

    examplegen <example> [output-dir] [--frontend]    - Standalone project
    examplegen-docs                                    - docs/ for every example
    examplegen-interact <contract.sol>                 - quick-interact script
    examplegen-component <artifact.json>               - React component
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .catalog import EXAMPLES, Catalog
from .components import write_contract_component
from .config import Settings
from .docs import generate_all_docs
from .errors import ExamplegenError
from .extractors import extract_contract_name, extract_functions, read_source
from .interact import render_functions_summary, write_quick_interact
from .materializer import create_example

ROOT_HELP = "Example repository root (default: $EXAMPLEGEN_ROOT or .)"


def _configure_logging(level: str) -> None:
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def print_catalog(catalog: Catalog) -> None:
    """Print usage and every example with its description."""
    print("FHEVM Example Generator")
    print("\nUsage: examplegen <example-name> [output-dir] [--frontend]\n")
    print("Available examples:")
    for key, entry in catalog.items():
        print(f"  {key}")
        print(f"    {entry.description}")
    print("\nExample:")
    print("  examplegen fhe-counter ./my-fhe-counter --frontend\n")


def main(argv: list[str] | None = None, catalog: Catalog = EXAMPLES) -> int:
    """Create a standalone example project."""
    args_list = sys.argv[1:] if argv is None else list(argv)
    positional = [a for a in args_list if a != "--frontend"]
    if not positional or positional[0] in ("-h", "--help"):
        print_catalog(catalog)
        return 0

    parser = argparse.ArgumentParser(prog="examplegen", add_help=False)
    parser.add_argument("example")
    parser.add_argument("output_dir", nargs="?")
    parser.add_argument(
        "--frontend", action="store_true", help="Include the Next.js frontend"
    )
    parser.add_argument("--root", help=ROOT_HELP)
    args = parser.parse_args(args_list)

    settings = Settings.from_env(args.root)
    _configure_logging(settings.log_level)

    if args.output_dir:
        output_dir = Path(args.output_dir).resolve()
    else:
        output_dir = settings.output_base / f"fhevm-example-{args.example}"

    try:
        create_example(
            catalog, args.example, output_dir, settings, use_frontend=args.frontend
        )
    except ExamplegenError as e:
        print(f"❌ Error: {e}", file=sys.stderr)
        return 1

    print("\n" + "=" * 60)
    print(f'✅ FHEVM example "{args.example}" created successfully!')
    print("=" * 60)
    print("\nNext steps:")
    print(f"  cd {output_dir}")
    print("  npm install")
    print("  npm run compile")
    print("  npm run test")
    print("  npx hardhat node &")
    print("  npx hardhat run scripts/quick-interact.ts --network localhost")
    if args.frontend:
        print("  cd frontend && npm install && npm run sync-abi && npm run dev")
    return 0


def docs_main(argv: list[str] | None = None, catalog: Catalog = EXAMPLES) -> int:
    """Generate documentation for every example."""
    parser = argparse.ArgumentParser(
        prog="examplegen-docs", description="Generate per-example docs and SUMMARY.md"
    )
    parser.add_argument("--root", help=ROOT_HELP)
    parser.add_argument(
        "--allow-missing",
        action="store_true",
        help="Document examples whose contract is missing instead of failing them",
    )
    args = parser.parse_args(argv)

    settings = Settings.from_env(args.root)
    _configure_logging(settings.log_level)

    print("Generating documentation...\n")
    tally = generate_all_docs(
        catalog, settings.root, require_sources=not args.allow_missing
    )

    print("\nSummary:")
    print(f"  ✓ Success: {tally.success_count}")
    print(f"  ✗ Errors: {tally.error_count}")
    print(f"  Total: {tally.total}")
    for key, message in tally.failed.items():
        print(f"    {key}: {message}")

    return 1 if tally.error_count else 0


def interact_main(argv: list[str] | None = None) -> int:
    """Generate a quick-interact script for one contract file."""
    parser = argparse.ArgumentParser(
        prog="examplegen-interact", description="Generate scripts/quick-interact.ts"
    )
    parser.add_argument("contract", type=Path, help="Solidity source file")
    parser.add_argument(
        "--output", type=Path, default=Path("scripts") / "quick-interact.ts"
    )
    parser.add_argument(
        "--summary", type=Path, help="Also write a Markdown function summary"
    )
    args = parser.parse_args(argv)

    _configure_logging(Settings.from_env().log_level)

    if not args.contract.exists():
        print(f"❌ Error: Contract not found: {args.contract}", file=sys.stderr)
        return 1

    try:
        write_quick_interact(args.contract, args.output)
    except ExamplegenError as e:
        print(f"❌ Error: {e}", file=sys.stderr)
        return 1
    print(f"✓ Quick-interact script generated: {args.output}")

    if args.summary:
        source = read_source(args.contract)
        name = extract_contract_name(source) or args.contract.stem
        args.summary.parent.mkdir(parents=True, exist_ok=True)
        args.summary.write_text(
            render_functions_summary(name, extract_functions(source)), encoding="utf-8"
        )
        print(f"✓ Function summary generated: {args.summary}")

    return 0


def component_main(argv: list[str] | None = None) -> int:
    """Generate a React interaction component from a compiled artifact."""
    parser = argparse.ArgumentParser(
        prog="examplegen-component",
        description="Generate a contract interaction component",
    )
    parser.add_argument("artifact", type=Path, help="Hardhat artifact JSON")
    parser.add_argument("--output", type=Path, help="Output .tsx path")
    parser.add_argument("--name", help="Contract name (default: artifact file name)")
    args = parser.parse_args(argv)

    _configure_logging(Settings.from_env().log_level)

    name = args.name or args.artifact.stem
    output = args.output or Path("app") / "components" / f"{name}Interaction.tsx"
    try:
        write_contract_component(args.artifact, output, contract_name=name)
    except ExamplegenError as e:
        print(f"❌ Error: {e}", file=sys.stderr)
        return 1
    print(f"✓ Component generated: {output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
