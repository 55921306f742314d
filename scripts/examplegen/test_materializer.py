"""Tests for standalone project generation."""

import json
import os
import re
import sys

import pytest

from examplegen import materializer
from examplegen.catalog import EXAMPLES, build_catalog
from examplegen.errors import (
    ContractNotFoundError,
    DestinationExistsError,
    MissingFileError,
    SourceDecodeError,
    UnknownExampleError,
)
from examplegen.materializer import create_example, render_deploy_script
from examplegen.models import ExampleEntry


def _snapshot(directory):
    return {
        str(p.relative_to(directory)): p.read_bytes() if p.is_file() else None
        for p in sorted(directory.rglob("*"))
    }


def test_fhe_counter_project(example_root, settings, tmp_path):
    dest = tmp_path / "my-fhe-counter"

    result = create_example(EXAMPLES, "fhe-counter", dest, settings)

    assert result == dest
    assert [p.name for p in (dest / "contracts").iterdir()] == ["FHECounter.sol"]
    assert (dest / "contracts" / "FHECounter.sol").read_text() == (
        example_root / "contracts" / "basic" / "FHECounter.sol"
    ).read_text()
    assert [p.name for p in (dest / "test").iterdir()] == ["FHECounter.ts"]
    assert (dest / "test" / "FHECounter.ts").read_text() == (
        example_root / "test" / "basic" / "FHECounter.ts"
    ).read_text()
    assert not (dest / "frontend").exists()
    assert "FHE Counter" in (dest / "README.md").read_text()


def test_swaps_template_sources(settings, tmp_path):
    dest = tmp_path / "auction"

    create_example(EXAMPLES, "blind-auction", dest, settings)

    contracts = sorted(p.name for p in (dest / "contracts").iterdir())
    assert contracts == ["BlindAuction.sol"]
    assert sorted(p.name for p in (dest / "test").iterdir()) == ["BlindAuction.ts"]
    assert (dest / "hardhat.config.ts").exists()


def test_excluded_directories_not_copied(settings, tmp_path):
    dest = tmp_path / "project"
    create_example(EXAMPLES, "fhe-counter", dest, settings)

    assert not (dest / "node_modules").exists()
    assert not (dest / "artifacts").exists()
    assert not (dest / "cache").exists()


def test_config_files_rewritten(settings, tmp_path):
    dest = tmp_path / "project"
    create_example(EXAMPLES, "fhe-counter", dest, settings)

    package = json.loads((dest / "package.json").read_text())
    assert package["name"] == "fhevm-example-fhe-counter"
    assert package["description"] == EXAMPLES["fhe-counter"].description
    assert package["homepage"].endswith("/fhe-counter")
    assert package["version"] == "0.0.1"

    deploy = (dest / "deploy" / "deploy.ts").read_text()
    assert deploy == render_deploy_script("FHECounter")


def test_deploy_script():
    script = render_deploy_script("BlindAuction")
    assert 'const deployedBlindAuction = await deploy("BlindAuction", {' in script
    assert 'func.id = "deploy_blindauction";' in script
    assert 'func.tags = ["BlindAuction"];' in script


def test_quick_interact_written(settings, tmp_path):
    dest = tmp_path / "project"
    create_example(EXAMPLES, "fhe-counter", dest, settings)

    script = dest / "scripts" / "quick-interact.ts"
    text = script.read_text()
    assert "FHECounter - Quick Interaction Script" in text
    assert "// 1. getCount() - View/Pure function" in text
    if sys.platform != "win32":
        assert os.access(script, os.X_OK)


def test_quick_interact_failure_is_not_fatal(settings, tmp_path, monkeypatch, caplog):
    def fail(contract_path, output_path):
        raise ContractNotFoundError(contract_path)

    monkeypatch.setattr(materializer, "write_quick_interact", fail)
    dest = tmp_path / "project"

    create_example(EXAMPLES, "fhe-counter", dest, settings)

    assert "Could not generate quick-interact script" in caplog.text
    assert not (dest / "scripts" / "quick-interact.ts").exists()
    assert (dest / "README.md").exists()


def test_frontend(settings, tmp_path):
    dest = tmp_path / "project"
    create_example(EXAMPLES, "fhe-counter", dest, settings, use_frontend=True)

    frontend = dest / "frontend"
    assert (frontend / "app" / "page.tsx").exists()
    assert (frontend / "scripts" / "sync-abi.js").exists()
    assert not (frontend / "node_modules").exists()
    assert (frontend / ".env.local").read_text() == 'NEXT_PUBLIC_CONTRACT_ADDRESS=""\n'
    assert "## Frontend (Optional)" in (dest / "README.md").read_text()


def test_unknown_key(settings, tmp_path):
    dest = tmp_path / "project"
    with pytest.raises(UnknownExampleError) as exc:
        create_example(EXAMPLES, "no-such-example", dest, settings)

    for key in EXAMPLES:
        assert key in str(exc.value)
    assert not dest.exists()


def test_missing_contract(settings, tmp_path):
    dest = tmp_path / "project"
    missing = "contracts/basic/fhe-operations/FHEAdd.sol"
    with pytest.raises(MissingFileError, match=missing):
        create_example(EXAMPLES, "fhe-add", dest, settings)
    assert not dest.exists()


def test_missing_test(example_root, settings, tmp_path):
    (example_root / "test" / "basic" / "FHECounter.ts").unlink()
    dest = tmp_path / "project"

    missing = "Test not found: test/basic/FHECounter.ts"
    with pytest.raises(MissingFileError, match=missing):
        create_example(EXAMPLES, "fhe-counter", dest, settings)
    assert not dest.exists()


def test_missing_frontend_template_checked_first(settings, tmp_path):
    settings.frontend_dir = tmp_path / "nowhere"
    dest = tmp_path / "project"

    with pytest.raises(MissingFileError, match="Frontend template"):
        create_example(EXAMPLES, "fhe-counter", dest, settings, use_frontend=True)
    assert not dest.exists()


def test_existing_destination_rejected_without_changes(settings, tmp_path):
    dest = tmp_path / "project"
    create_example(EXAMPLES, "fhe-counter", dest, settings)
    before = _snapshot(dest)

    with pytest.raises(DestinationExistsError, match=re.escape(str(dest))):
        create_example(EXAMPLES, "fhe-counter", dest, settings, use_frontend=True)

    assert _snapshot(dest) == before


def test_no_contract_declaration(example_root, settings, tmp_path):
    (example_root / "contracts" / "Lib.sol").write_text(
        "// not a contract {\n"
        "library Math {\n"
        "    function one() internal pure returns (uint) { return 1; }\n"
        "}\n"
    )
    catalog = build_catalog(
        [
            ExampleEntry(
                key="math",
                title="Math",
                description="Library only",
                contract="contracts/Lib.sol",
                test="test/basic/FHECounter.ts",
                output="docs/math.md",
                category="Basic",
                difficulty=EXAMPLES["fhe-counter"].difficulty,
            )
        ]
    )
    dest = tmp_path / "project"

    with pytest.raises(ContractNotFoundError, match="contracts/Lib.sol"):
        create_example(catalog, "math", dest, settings)
    assert not dest.exists()


def test_frontend_merges_into_template_frontend(example_root, settings, tmp_path):
    template_frontend = example_root / "fhevm-hardhat-template" / "frontend"
    template_frontend.mkdir()
    (template_frontend / "keep.txt").write_text("from template\n")
    dest = tmp_path / "project"

    create_example(EXAMPLES, "fhe-counter", dest, settings, use_frontend=True)

    assert (dest / "frontend" / "keep.txt").read_text() == "from template\n"
    assert (dest / "frontend" / "app" / "page.tsx").exists()
    assert (dest / "frontend" / ".env.local").exists()
    assert (dest / "README.md").exists()


def test_undecodable_contract_rejected(example_root, settings, tmp_path):
    contract = example_root / "contracts" / "basic" / "FHECounter.sol"
    contract.write_bytes(b"contract FHECounter {\xff}\n")
    dest = tmp_path / "project"

    with pytest.raises(SourceDecodeError, match="FHECounter.sol"):
        create_example(EXAMPLES, "fhe-counter", dest, settings)
    assert not dest.exists()
