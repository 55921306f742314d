"""Quick-interact script generation.

Builds a Hardhat script that attaches to (or deploys) a contract and calls
each of its functions once, so an example can be exercised from the
terminal without a frontend or wallet.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from .errors import ContractNotFoundError
from .extractors import extract_contract_name, extract_functions, read_source
from .models import FunctionDescriptor

KEYCAP = "\ufe0f\u20e3"
RULE = "  // " + "=" * 64
SKIPPED = "Skipped (requires parameters or specific setup)"


def _section(title: str) -> list[str]:
    return [RULE, f"  // {title}", RULE]


def render_interaction_step(
    func: FunctionDescriptor, index: int, contract_var: str = "contract"
) -> str:
    """Render the example call block for one function.

    Every call is emitted without arguments. Functions that need them fail
    at runtime and the generated block reports them as skipped.

    Args:
        func: Descriptor to call
        index: 0-based position; the block is numbered ``index + 1``
        contract_var: Identifier bound to the contract instance
    """
    step = index + 1
    call = f"{contract_var}.{func.name}()"
    announce = f'  console.log("\\n{step}{KEYCAP}  Calling {func.name}()...");'

    if func.is_view_or_pure:
        lines = [
            f"  // {step}. {func.name}() - View/Pure function",
            announce,
            "  try {",
            f"    const result = await {call};",
            "    console.log(`   📊 Result: ${result.toString()}`);",
            "  } catch (error) {",
            f"    console.log(`   ℹ️  {SKIPPED}`);",
            "  }",
        ]
    else:
        lines = [
            f"  // {step}. {func.name}() - State-changing function",
            announce,
            "  try {",
            f"    const tx = await {call};",
            "    const receipt = await tx.wait();",
            "    console.log(`   ✅ Success (Gas: ${receipt?.gasUsed})`);",
            "  } catch (error) {",
            f"    console.log(`   ⚠️  {SKIPPED}`);",
            "  }",
        ]

    return "\n".join(lines)


def _render_header(
    contract_name: str, functions: list[FunctionDescriptor]
) -> list[str]:
    listing = [f" *    - {f.name}({', '.join(f.params)})" for f in functions]
    return [
        "#!/usr/bin/env node",
        "/**",
        f" * {contract_name} - Quick Interaction Script",
        " *",
        f" * Auto-generated script for interacting with {contract_name} contract.",
        " * This script demonstrates all the main functions "
        "without requiring frontend or wallet extensions.",
        " *",
        " * Run with local network:",
        " *   npx hardhat node",
        " *   npx hardhat run scripts/quick-interact.ts --network localhost",
        " *",
        " * Run with Sepolia testnet:",
        " *   npx hardhat run scripts/quick-interact.ts --network sepolia",
        " *",
        " * Available contract functions:",
        *listing,
        " */",
        "",
        'import { ethers } from "hardhat";',
        'import * as fs from "fs";',
        'import * as path from "path";',
        "",
    ]


def _render_setup(contract_name: str) -> list[str]:
    return [
        "async function main() {",
        f'  console.log("🚀 {contract_name} - '
        'Contract Interaction (Terminal Only)\\n");',
        "",
        *_section("SETUP: Get accounts"),
        "  const [deployer, alice, bob, charlie] = await ethers.getSigners();",
        "",
        '  console.log("📋 Accounts:");',
        "  console.log(`   Deployer: ${deployer.address}`);",
        "  console.log(`   Alice:    ${alice.address}`);",
        "  console.log(`   Bob:      ${bob.address}`);",
        "  console.log(`   Charlie:  ${charlie.address}`);",
        "",
    ]


def _render_detection(contract_name: str, contract_var: str) -> list[str]:
    factory = f'  const factory = await ethers.getContractFactory("{contract_name}");'
    return [
        *_section("DETECT: Auto-detect deployed contract address"),
        "  const networkName = (await ethers.provider.getNetwork()).name;",
        "  const deploymentsDir = "
        'path.join(__dirname, "..", "deployments", networkName);',
        f'  const deploymentFile = path.join(deploymentsDir, "{contract_name}.json");',
        "",
        "  let contractAddress: string;",
        f"  let {contract_var};",
        "",
        "  if (fs.existsSync(deploymentFile)) {",
        '    const deployment = JSON.parse(fs.readFileSync(deploymentFile, "utf-8"));',
        "    contractAddress = deployment.address;",
        "",
        '    console.log("\\n📦 Contract Status:");',
        "    console.log(`   ✅ Using existing deployment at: ${contractAddress}`);",
        "    console.log(`   🌐 Network: ${networkName}`);",
        "",
        "  " + factory,
        f"    {contract_var} = factory.attach(contractAddress);",
        "  } else {",
        f'    console.log("\\n📦 Deploying {contract_name}...");',
        "",
        "  " + factory,
        f"    {contract_var} = await factory.deploy();",
        f"    await {contract_var}.waitForDeployment();",
        f"    contractAddress = await {contract_var}.getAddress();",
        "",
        "    console.log(`   ✅ Deployed at: ${contractAddress}`);",
        "    console.log(`   🌐 Network: ${networkName}`);",
        "  }",
        "",
        "  console.log(`   ℹ️  Contract Address: ${contractAddress}`);",
        "",
    ]


def _render_summary() -> list[str]:
    explorer = (
        "    `   1. Verify on Etherscan: "
        'https://${networkName === "sepolia" ? "sepolia." : ""}'
        "etherscan.io/address/${contractAddress}`,"
    )
    return [
        *_section("SUMMARY"),
        '  console.log("\\n" + "=".repeat(60));',
        '  console.log("✨ Contract interaction complete!");',
        '  console.log("=".repeat(60));',
        "",
        "  console.log(`\\n📌 Contract Address (save for frontend):"
        "\\n   ${contractAddress}\\n`);",
        '  console.log("📖 Next Steps:");',
        "  console.log(",
        explorer,
        "  );",
        "  console.log(`   2. Use in frontend: "
        "Set NEXT_PUBLIC_CONTRACT_ADDRESS=${contractAddress}`);",
        '  console.log("   3. Run again to test more interactions!");',
        "}",
        "",
        "main()",
        "  .then(() => process.exit(0))",
        "  .catch((error) => {",
        '    console.error("\\n❌ Error:", error.message);',
        "    process.exit(1);",
        "  });",
        "",
    ]


def render_quick_interact_script(
    contract_name: str,
    functions: list[FunctionDescriptor],
    contract_var: str = "contract",
) -> str:
    """Assemble the full quick-interact script for a contract.

    Output depends only on the arguments, so identical input gives
    byte-identical text.
    """
    steps = "\n\n".join(
        render_interaction_step(func, i, contract_var)
        for i, func in enumerate(functions)
    )

    lines = [
        *_render_header(contract_name, functions),
        *_render_setup(contract_name),
        *_render_detection(contract_name, contract_var),
        *_section("INTERACT: Call contract functions"),
        '  console.log("\\n🎯 Calling Contract Functions:\\n");',
        "",
    ]
    if steps:
        lines.extend([steps, ""])
    lines.extend(_render_summary())

    return "\n".join(lines)


def generate_quick_interact_script(source: str, origin: str | Path = "<source>") -> str:
    """Generate a quick-interact script from contract source text.

    Raises:
        ContractNotFoundError: If the source declares no contract
    """
    contract_name = extract_contract_name(source)
    if not contract_name:
        raise ContractNotFoundError(origin)

    return render_quick_interact_script(contract_name, extract_functions(source))


def write_quick_interact(contract_path: Path, output_path: Path) -> Path:
    """Generate a quick-interact script for a contract file and write it."""
    source = read_source(contract_path)
    script = generate_quick_interact_script(source, origin=contract_path)

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(script, encoding="utf-8")

    if sys.platform != "win32":
        os.chmod(output_path, 0o755)

    return output_path


def render_functions_summary(
    contract_name: str, functions: list[FunctionDescriptor]
) -> str:
    """Generate a Markdown summary of a contract's callable functions."""
    if not functions:
        return f"# {contract_name} - Contract Functions\n\nNo public functions found.\n"

    lines = [
        f"# {contract_name} - Contract Functions",
        "",
        "## Overview",
        "",
        f"Total public functions: {len(functions)}",
        "",
        "## Functions",
        "",
    ]

    for f in functions:
        kind = "(View/Pure)" if f.is_view_or_pure else "(State-Changing)"
        lines.append(f"### {f.name}() {kind}")
        if f.params:
            lines.append(f"  - Parameters: {', '.join(f.params)}")
        if f.is_payable:
            lines.append("  - 💰 Payable: true")
        lines.append("")

    lines.extend(
        [
            "## Quick Interact",
            "",
            "Run the auto-generated quick-interact script:",
            "",
            "```bash",
            "npx hardhat run scripts/quick-interact.ts --network localhost",
            "```",
            "",
            "Or with Sepolia:",
            "",
            "```bash",
            "npx hardhat run scripts/quick-interact.ts --network sepolia",
            "```",
            "",
        ]
    )

    return "\n".join(lines)
