"""Standalone project generation for a single catalog example.

Copies the Hardhat template, swaps in the example's contract and test,
rewrites the deploy script and package.json, and adds a quick-interact
script, an optional frontend and a README.
"""

from __future__ import annotations

import json
import logging
import shutil
from pathlib import Path

from .catalog import Catalog, get_example
from .config import EXCLUDED_DIRS, Settings
from .errors import (
    ContractNotFoundError,
    DestinationExistsError,
    ExamplegenError,
    MissingFileError,
    TemplateError,
)
from .extractors import extract_contract_name, read_source
from .interact import write_quick_interact
from .models import ExampleEntry

log = logging.getLogger(__name__)

FRONTEND_ENV = 'NEXT_PUBLIC_CONTRACT_ADDRESS=""\n'


def _ignore_excluded(directory: str, names: list[str]) -> set[str]:
    """copytree ignore hook: skip excluded directories, never files."""
    return {
        name
        for name in names
        if name in EXCLUDED_DIRS and (Path(directory) / name).is_dir()
    }


def copy_template(source: Path, destination: Path, merge: bool = False) -> None:
    """Recursively copy a template tree, leaving out generated directories.

    With ``merge`` an existing destination is merged into, files from
    ``source`` replacing same-named ones.
    """
    if not source.is_dir():
        raise MissingFileError(source, "Template directory")
    shutil.copytree(source, destination, ignore=_ignore_excluded, dirs_exist_ok=merge)


def render_deploy_script(contract_name: str) -> str:
    """hardhat-deploy registration script for one contract."""
    return "\n".join(
        [
            'import { DeployFunction } from "hardhat-deploy/types";',
            'import { HardhatRuntimeEnvironment } from "hardhat/types";',
            "",
            "const func: DeployFunction = "
            "async function (hre: HardhatRuntimeEnvironment) {",
            "  const { deployer } = await hre.getNamedAccounts();",
            "  const { deploy } = hre.deployments;",
            "",
            f'  const deployed{contract_name} = await deploy("{contract_name}", {{',
            "    from: deployer,",
            "    log: true,",
            "  });",
            "",
            f"  console.log(`{contract_name} contract: `, "
            f"deployed{contract_name}.address);",
            "};",
            "export default func;",
            f'func.id = "deploy_{contract_name.lower()}";',
            f'func.tags = ["{contract_name}"];',
            "",
        ]
    )


def update_package_json(project_dir: Path, key: str, description: str) -> None:
    """Rewrite the name, description and homepage of the project descriptor."""
    package_json = project_dir / "package.json"
    if not package_json.exists():
        raise TemplateError(f"Template has no package.json: {package_json}")

    data = json.loads(package_json.read_text(encoding="utf-8"))
    data["name"] = f"fhevm-example-{key}"
    data["description"] = description
    data["homepage"] = f"https://github.com/zama-ai/fhevm-examples/{key}"
    package_json.write_text(json.dumps(data, indent=2), encoding="utf-8")


def _replace_sources(
    project_dir: Path, contract_path: Path, test_path: Path, contract_name: str
) -> None:
    contracts_dir = project_dir / "contracts"
    test_dir = project_dir / "test"
    contracts_dir.mkdir(exist_ok=True)
    test_dir.mkdir(exist_ok=True)

    for old in contracts_dir.glob("*.sol"):
        old.unlink()
    shutil.copyfile(contract_path, contracts_dir / f"{contract_name}.sol")
    log.info("Contract copied: %s.sol", contract_name)

    for old in test_dir.glob("*.ts"):
        old.unlink()
    shutil.copyfile(test_path, test_dir / test_path.name)
    log.info("Test copied: %s", test_path.name)


def _frontend_section() -> list[str]:
    return [
        "## Frontend (Optional)",
        "",
        "This example includes an optional Next.js frontend template.",
        "",
        "1. **Install frontend dependencies**",
        "   ```bash",
        "   cd frontend",
        "   npm install",
        "   ```",
        "",
        "2. **Sync contract ABI**",
        "   ```bash",
        "   npm run sync-abi",
        "   ```",
        "",
        "3. **Configure and Run**",
        "   Edit `.env.local` with your deployed contract address, then:",
        "   ```bash",
        "   npm run dev",
        "   ```",
        "",
    ]


def render_project_readme(
    entry: ExampleEntry, contract_name: str, use_frontend: bool
) -> str:
    """README for a generated standalone project."""
    lines = [
        f"# {entry.title}",
        "",
        f"FHEVM example `{entry.key}` ({entry.category}, {entry.difficulty.value}).",
        "",
        entry.description,
        "",
        "## Quick Start",
        "",
        "### Prerequisites",
        "",
        "- **Node.js**: Version 20 or higher",
        "- **npm**: Package manager",
        "",
        "### Installation",
        "",
        "1. **Install dependencies**",
        "",
        "   ```bash",
        "   npm install",
        "   ```",
        "",
        "2. **Set up environment variables**",
        "",
        "   Copy `.env.example` to `.env` and update as needed.",
        "",
        "3. **Compile and test**",
        "",
        "   ```bash",
        "   npm run compile",
        "   npm run test",
        "   ```",
        "",
    ]

    if use_frontend:
        lines.extend(_frontend_section())

    lines.extend(
        [
            "## Contract",
            "",
            f"The main contract is `{contract_name}` located in "
            f"`contracts/{contract_name}.sol`.",
            "",
            "## Interact Without Frontend",
            "",
            f"`scripts/quick-interact.ts` is generated from the {contract_name}",
            "source and calls each of its functions from the terminal. It reuses",
            "an existing deployment from `deployments/<network>/` or deploys a",
            "fresh instance.",
            "",
            "```bash",
            "# Start local blockchain",
            "npx hardhat node",
            "",
            "# In another terminal, run the script",
            "npx hardhat run scripts/quick-interact.ts --network localhost",
            "```",
            "",
            "For interactive exploration:",
            "",
            "```bash",
            "npx hardhat console --network localhost",
            "",
            "> const contract = "
            f"await ethers.getContractAt('{contract_name}', '<deployed-address>')",
            "```",
            "",
            "## Testing",
            "",
            "```bash",
            "npm run test",
            "npm run test:sepolia",
            "```",
            "",
            "## Deployment",
            "",
            "```bash",
            "npx hardhat node",
            "npx hardhat deploy --network localhost",
            "",
            "npx hardhat deploy --network sepolia",
            "npx hardhat verify --network sepolia <CONTRACT_ADDRESS>",
            "```",
            "",
            "## Documentation",
            "",
            "- [FHEVM Documentation](https://docs.zama.ai/fhevm)",
            "- [FHEVM Examples](https://docs.zama.org/protocol/examples)",
            "- [FHEVM Hardhat Plugin]"
            "(https://docs.zama.ai/protocol/solidity-guides/development-guide/hardhat)",
            "",
            "## License",
            "",
            "This project is licensed under the BSD-3-Clause-Clear License.",
            "",
        ]
    )

    return "\n".join(lines)


def create_example(
    catalog: Catalog,
    key: str,
    output_dir: Path,
    settings: Settings,
    use_frontend: bool = False,
) -> Path:
    """Materialize a standalone project for one example.

    Every check that can reject the request runs before anything is
    written, so a rejected call leaves the filesystem untouched.

    Args:
        catalog: Example catalog to resolve ``key`` in
        key: Catalog key, e.g. "fhe-counter"
        output_dir: Destination; must not exist yet
        settings: Repository root and template locations
        use_frontend: Also copy the frontend template to ``frontend/``

    Returns:
        The project directory

    Raises:
        UnknownExampleError: Key not in catalog
        MissingFileError: Contract, test or template missing
        DestinationExistsError: ``output_dir`` already exists
        ContractNotFoundError: No contract declaration in the source
        SourceDecodeError: Contract source is not UTF-8 text
    """
    entry = get_example(catalog, key)
    contract_path = settings.root / entry.contract
    test_path = settings.root / entry.test

    if not contract_path.exists():
        raise MissingFileError(entry.contract, "Contract")
    if not test_path.exists():
        raise MissingFileError(entry.test, "Test")
    if output_dir.exists():
        raise DestinationExistsError(output_dir)
    if not settings.template_dir.is_dir():
        raise MissingFileError(settings.template_dir, "Template directory")
    if use_frontend and not settings.frontend_dir.is_dir():
        raise MissingFileError(settings.frontend_dir, "Frontend template")

    contract_name = extract_contract_name(read_source(contract_path), anchored=True)
    if not contract_name:
        raise ContractNotFoundError(entry.contract)

    log.info("Creating FHEVM example: %s", key)
    log.info("Output directory: %s", output_dir)

    log.info("Step 1: Copying template...")
    copy_template(settings.template_dir, output_dir)

    log.info("Step 2: Copying contract and test...")
    _replace_sources(output_dir, contract_path, test_path, contract_name)

    log.info("Step 3: Updating configuration...")
    deploy_dir = output_dir / "deploy"
    deploy_dir.mkdir(exist_ok=True)
    (deploy_dir / "deploy.ts").write_text(
        render_deploy_script(contract_name), encoding="utf-8"
    )
    update_package_json(output_dir, key, entry.description)

    log.info("Step 4: Generating quick-interact script...")
    try:
        write_quick_interact(
            output_dir / "contracts" / f"{contract_name}.sol",
            output_dir / "scripts" / "quick-interact.ts",
        )
    except (ExamplegenError, OSError) as e:
        log.warning("Could not generate quick-interact script: %s", e)

    if use_frontend:
        log.info("Step 5: Copying frontend template...")
        frontend = output_dir / "frontend"
        copy_template(settings.frontend_dir, frontend, merge=True)
        (frontend / ".env.local").write_text(FRONTEND_ENV, encoding="utf-8")

    log.info("Generating README...")
    readme = render_project_readme(entry, contract_name, use_frontend)
    (output_dir / "README.md").write_text(readme, encoding="utf-8")

    log.info('FHEVM example "%s" created', key)
    return output_dir
