"""Contract-specific React component generation from a compiled ABI."""

from __future__ import annotations

from pathlib import Path

from .errors import MissingFileError
from .extractors import extract_abi_functions
from .models import AbiFunction, AbiParam

MAX_READ_CARDS = 5
INPUT_CLASSES = (
    "w-full px-4 py-3 rounded-lg bg-white/5 border border-purple-400/30 "
    "text-white focus:outline-none focus:border-purple-400"
)


def _capitalize(name: str) -> str:
    return name[:1].upper() + name[1:]


def _state_var(fn: AbiFunction, param: AbiParam) -> str:
    return f"{fn.name}{_capitalize(param.name)}"


def _encrypted_input(fn: AbiFunction) -> AbiParam | None:
    """First scalar uint input; its value is encrypted before sending."""
    for param in fn.inputs:
        if "uint" in param.type and "[]" not in param.type:
            return param
    return None


def _abi_fragment(fn: AbiFunction) -> str:
    params = ", ".join(f"{p.type} {p.name}" for p in fn.inputs)
    view = " view" if fn.is_view else ""
    returns = ", ".join(p.type for p in fn.outputs)
    return f"'function {fn.name}({params}){view} returns ({returns})'"


def render_function_handler(fn: AbiFunction) -> str:
    """State hooks and the async click handler for one function."""
    cap = _capitalize(fn.name)
    lines = [
        f"  // {fn.name} Function",
        f"  const [{fn.name}Loading, set{cap}Loading] = useState(false);",
    ]
    for param in fn.inputs:
        var = _state_var(fn, param)
        lines.append(f"  const [{var}, set{_capitalize(var)}] = useState('');")

    args = ", ".join(_state_var(fn, p) for p in fn.inputs)
    lines.extend(
        [
            "",
            f"  const handle{cap} = async () => {{",
            f"    set{cap}Loading(true);",
            "    try {",
            f"      let args: any[] = [{args}];",
        ]
    )

    encrypted = _encrypted_input(fn)
    if encrypted:
        plain = _state_var(fn, encrypted)
        encrypted_args = ", ".join(
            "encrypted" if p.name == encrypted.name else _state_var(fn, p)
            for p in fn.inputs
        )
        lines.extend(
            [
                "",
                "      // Encrypt input using FHEVM",
                "      const fhevm = await initFhevm();",
                f"      const encrypted = await fhevm.encrypt32(parseInt({plain}));",
                f"      args = [{encrypted_args}];",
            ]
        )

    lines.extend(["", f"      console.log('Calling {fn.name}...');"])

    if fn.is_view:
        lines.append(f"      alert('{cap} call initiated. Check console for result.');")
    else:
        lines.extend(
            [
                "      write({",
                "        address: CONTRACT_ADDRESS as `0x${string}`,",
                "        abi: contractABI,",
                f"        functionName: '{fn.name}',",
            ]
        )
        if fn.inputs:
            lines.append("        args: args,")
        lines.extend(["      });", f"      alert('{cap} transaction sent!');"])

    lines.extend(
        [
            "    } catch (error) {",
            "      console.error('Error:', error);",
            f"      alert('Error calling {fn.name}');",
            "    } finally {",
            f"      set{cap}Loading(false);",
            "    }",
            "  };",
        ]
    )
    return "\n".join(lines)


def _write_card(fn: AbiFunction) -> list[str]:
    cap = _capitalize(fn.name)
    lines = [
        '        <div className="glass rounded-xl p-6">',
        f'          <h3 className="text-xl font-semibold text-white mb-4">{cap}</h3>',
    ]
    for param in fn.inputs:
        var = _state_var(fn, param)
        setter = f"set{_capitalize(var)}"
        kind = "text" if "address" in param.type else "number"
        if "uint" in param.type:
            placeholder = "🔐 Will be encrypted"
        else:
            placeholder = f"Enter {param.name}..."
        lines.extend(
            [
                '          <div className="mb-4">',
                '            <label className="block text-purple-200 mb-2">'
                f"{_capitalize(param.name)}</label>",
                "            <input",
                f'              type="{kind}"',
                f"              value={{{var}}}",
                f"              onChange={{(e) => {setter}(e.target.value)}}",
                f'              placeholder="{placeholder}"',
                f'              className="{INPUT_CLASSES}"',
                "            />",
                "          </div>",
            ]
        )
    lines.extend(
        [
            "          <button",
            f"            onClick={{handle{cap}}}",
            f"            disabled={{{fn.name}Loading || isWritePending}}",
            '            className="btn-primary w-full"',
            "          >",
            f"            {{{fn.name}Loading || isWritePending "
            f"? 'Processing...' : '{cap}'}}",
            "          </button>",
            "        </div>",
        ]
    )
    return lines


def _read_card(fn: AbiFunction) -> list[str]:
    cap = _capitalize(fn.name)
    return [
        '        <div className="glass rounded-xl p-6">',
        f'          <h3 className="text-lg font-semibold text-white mb-2">{cap}</h3>',
        '          <div className="text-xl font-mono text-purple-300 break-all">'
        "🔒 Encrypted Value</div>",
        "          <button",
        f"            onClick={{handle{cap}}}",
        f"            disabled={{{fn.name}Loading}}",
        '            className="mt-4 text-sm text-purple-400 '
        'hover:text-purple-300 underline"',
        "          >",
        f"            {{{fn.name}Loading ? 'Loading...' : 'Check {cap}'}}",
        "          </button>",
        "        </div>",
    ]


def render_contract_component(contract_name: str, functions: list[AbiFunction]) -> str:
    """Generate a ``<Name>Interaction`` component for a contract's ABI."""
    write_functions = [f for f in functions if not f.is_view]
    read_functions = [f for f in functions if f.is_view][:MAX_READ_CARDS]

    lines = [
        "'use client';",
        "",
        "import { useState } from 'react';",
        "import { useWriteContract, useAccount } from 'wagmi';",
        "import { parseAbi } from 'viem';",
        "import { initFhevm } from '../../lib/fhevm';",
        "",
        "const CONTRACT_ADDRESS = process.env.NEXT_PUBLIC_CONTRACT_ADDRESS || '0x...';",
        "",
        "const contractABI = parseAbi([",
        ",\n".join(f"  {_abi_fragment(f)}" for f in functions),
        "]);",
        "",
        f"export default function {contract_name}Interaction() {{",
        "  const { address } = useAccount();",
        "  const { writeContract: write, isPending: isWritePending } = "
        "useWriteContract();",
        "",
        "\n\n".join(render_function_handler(f) for f in functions),
        "",
        "  return (",
        '    <div className="grid grid-cols-1 lg:grid-cols-2 gap-8">',
        '      <div className="space-y-6">',
        '        <h2 className="text-2xl font-bold text-white mb-4">'
        "Contract Functions</h2>",
    ]
    for fn in write_functions:
        lines.extend(_write_card(fn))
    lines.extend(
        [
            "      </div>",
            '      <div className="space-y-6">',
            '        <h2 className="text-2xl font-bold text-white mb-4">'
            "Contract State</h2>",
        ]
    )
    for fn in read_functions:
        lines.extend(_read_card(fn))
    lines.extend(
        [
            "      </div>",
            "    </div>",
            "  );",
            "}",
            "",
        ]
    )
    return "\n".join(lines)


def write_contract_component(
    artifact_path: Path, output_path: Path, contract_name: str | None = None
) -> Path:
    """Generate a component from a Hardhat artifact and write it.

    Raises:
        MissingFileError: If the artifact does not exist
    """
    if not artifact_path.exists():
        raise MissingFileError(artifact_path, "Artifact")

    functions = extract_abi_functions(artifact_path)
    name = contract_name or artifact_path.stem

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(render_contract_component(name, functions), encoding="utf-8")
    return output_path
