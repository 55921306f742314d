"""Scaffolding and documentation generators for the FHEVM example collection.

Generates:
    output/fhevm-example-{key}/       - Standalone Hardhat project per example
    scripts/quick-interact.ts         - Terminal interaction script per contract
    docs/{category}/{key}.md          - Per-example documentation
    docs/SUMMARY.md                   - Category-grouped index
"""

__version__ = "0.1.0"
