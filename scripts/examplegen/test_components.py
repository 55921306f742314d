"""Tests for React component generation."""

import pytest

from examplegen.components import (
    render_contract_component,
    render_function_handler,
    write_contract_component,
)
from examplegen.errors import MissingFileError
from examplegen.models import AbiFunction, AbiParam

INCREMENT = AbiFunction(
    name="increment",
    inputs=(AbiParam("amount", "uint32"),),
    state_mutability="nonpayable",
)
TRANSFER = AbiFunction(
    name="transfer",
    inputs=(AbiParam("to", "address"), AbiParam("amount", "uint64")),
    outputs=(AbiParam("", "bool"),),
)
GET_COUNT = AbiFunction(
    name="getCount",
    outputs=(AbiParam("", "bytes32"),),
    state_mutability="view",
)


def test_write_handler_encrypts_uint_input():
    handler = render_function_handler(INCREMENT)
    assert "const [incrementLoading, setIncrementLoading] = useState(false);" in handler
    assert "const [incrementAmount, setIncrementAmount] = useState('');" in handler
    encrypt = "const encrypted = await fhevm.encrypt32(parseInt(incrementAmount));"
    assert encrypt in handler
    assert "args = [encrypted];" in handler
    assert "functionName: 'increment'," in handler
    assert "args: args," in handler


def test_encryption_replaces_only_first_uint():
    handler = render_function_handler(TRANSFER)
    assert "args = [transferTo, encrypted];" in handler


def test_view_handler_does_not_write():
    handler = render_function_handler(GET_COUNT)
    assert "write({" not in handler
    assert "fhevm.encrypt32" not in handler
    assert "alert('GetCount call initiated. Check console for result.');" in handler


def test_component_layout():
    component = render_contract_component(
        "FHECounter", [INCREMENT, TRANSFER, GET_COUNT]
    )

    assert component.startswith("'use client';\n")
    assert "export default function FHECounterInteraction() {" in component
    assert "  'function increment(uint32 amount) returns ()'," in component
    assert "  'function getCount() view returns (bytes32)'" in component
    assert 'type="text"' in component  # address input
    assert 'placeholder="🔐 Will be encrypted"' in component
    assert component.index("Contract Functions") < component.index("Contract State")
    assert "{getCountLoading ? 'Loading...' : 'Check GetCount'}" in component


def test_read_cards_are_capped():
    views = [AbiFunction(name=f"value{i}", state_mutability="view") for i in range(7)]
    component = render_contract_component("Many", views)
    assert component.count("🔒 Encrypted Value") == 5


def test_missing_artifact_writes_nothing(tmp_path):
    output = tmp_path / "Counter.tsx"

    with pytest.raises(MissingFileError, match="Artifact not found"):
        write_contract_component(tmp_path / "Counter.json", output)
    assert not output.exists()
