"""Shared pytest fixtures: a miniature example repository on disk."""

import json
from pathlib import Path

import pytest

from examplegen.config import Settings

FHE_COUNTER_SOL = """\
// SPDX-License-Identifier: BSD-3-Clause-Clear
pragma solidity ^0.8.24;

import {FHE, euint32, externalEuint32} from "@fhevm/solidity/lib/FHE.sol";
import {SepoliaConfig} from "@fhevm/solidity/config/ZamaConfig.sol";

/// @title A simple FHE counter contract
/// @notice Counter whose value stays encrypted
/// @dev Uses FHE.add and FHE.sub on euint32 handles
contract FHECounter is SepoliaConfig {
    euint32 private _count;

    function getCount() external view returns (euint32) {
        return _count;
    }

    function increment(externalEuint32 inputEuint32, bytes calldata inputProof) external {
        euint32 value = FHE.fromExternal(inputEuint32, inputProof);
        _count = FHE.add(_count, value);
        _allow();
    }

    function decrement(externalEuint32 inputEuint32, bytes calldata inputProof) external {
        euint32 value = FHE.fromExternal(inputEuint32, inputProof);
        _count = FHE.sub(_count, value);
        _allow();
    }

    function _allow() internal {
        FHE.allowThis(_count);
        FHE.allow(_count, msg.sender);
    }
}
"""

BLIND_AUCTION_SOL = """\
// SPDX-License-Identifier: BSD-3-Clause-Clear
pragma solidity ^0.8.24;

/// @title Blind auction
contract BlindAuction {
    function bid(bytes32 encryptedAmount) external payable {
    }

    function winner() public view returns (address) {
        return address(0);
    }
}
"""

TEMPLATE_FILES = {
    "contracts/FHECounter.sol": "// template counter\ncontract FHECounter {}\n",
    "test/FHECounter.ts": "// template test\n",
    "deploy/deploy.ts": "// template deploy\n",
    "hardhat.config.ts": "export default {};\n",
    "package.json": json.dumps(
        {
            "name": "fhevm-hardhat-template",
            "description": "Template",
            "version": "0.0.1",
        },
        indent=2,
    ),
    "node_modules/hardhat/index.js": "module.exports = {};\n",
    "artifacts/contracts/FHECounter.json": "{}\n",
    "cache/solidity-files-cache.json": "{}\n",
}

FRONTEND_FILES = {
    "app/page.tsx": "export default function Page() { return null; }\n",
    "scripts/sync-abi.js": "// sync\n",
    "node_modules/react/index.js": "module.exports = {};\n",
    ".next/cache/x": "cached\n",
}


def write_tree(base: Path, files: dict[str, str]) -> None:
    for rel, content in files.items():
        path = base / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content)


@pytest.fixture
def example_root(tmp_path):
    """A repository root with the templates and two catalog examples."""
    root = tmp_path / "repo"
    write_tree(root / "fhevm-hardhat-template", TEMPLATE_FILES)
    write_tree(root / "frontend-template", FRONTEND_FILES)
    write_tree(
        root,
        {
            "contracts/basic/FHECounter.sol": FHE_COUNTER_SOL,
            "test/basic/FHECounter.ts": "describe('FHECounter', () => {});\n",
            "contracts/advanced/BlindAuction.sol": BLIND_AUCTION_SOL,
            "test/advanced/BlindAuction.ts": "describe('BlindAuction', () => {});\n",
        },
    )
    return root


@pytest.fixture
def settings(example_root, tmp_path):
    return Settings(
        root=example_root,
        template_dir=example_root / "fhevm-hardhat-template",
        frontend_dir=example_root / "frontend-template",
        output_base=tmp_path / "output",
    )


@pytest.fixture
def clean_env(monkeypatch):
    """Drop EXAMPLEGEN_* overrides from the calling environment."""
    for name in (
        "EXAMPLEGEN_ROOT",
        "EXAMPLEGEN_TEMPLATE_DIR",
        "EXAMPLEGEN_FRONTEND_DIR",
        "EXAMPLEGEN_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
