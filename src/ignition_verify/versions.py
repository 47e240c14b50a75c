"""Compiler version utilities for ignition-verify library."""


def normalize_compiler_version(solc_long_version: str) -> str:
    """
    Normalize a solc long version to the form verifiers expect.

    Args:
        solc_long_version: Version from build info, e.g., "0.8.19+commit.7dd6d404"

    Returns:
        Version prefixed with 'v', e.g., "v0.8.19+commit.7dd6d404"
    """
    if solc_long_version.startswith("v"):
        return solc_long_version

    return f"v{solc_long_version}"
