"""Artifact and build info parsers for ignition-verify library."""

import json
from pathlib import Path
from typing import Any, Dict

from .exceptions import ArtifactNotFoundError
from .types import Artifact, BuildInfo


def _read_json(file_path: Path) -> Dict[str, Any]:
    try:
        with open(file_path) as f:
            return json.load(f)
    except FileNotFoundError as e:
        raise ArtifactNotFoundError(f"Deployment file not found: {file_path}") from e


def parse_artifact(file_path: Path) -> Artifact:
    """
    Parse a hardhat artifact JSON file.

    Args:
        file_path: Path to artifacts/{artifact_id}.json

    Returns:
        Artifact with canonical field names

    Raises:
        ArtifactNotFoundError: If the file doesn't exist
        KeyError: If contractName, sourceName or abi is missing
    """
    data = _read_json(file_path)

    return Artifact(
        contract_name=data["contractName"],
        source_name=data["sourceName"],
        abi=data["abi"],
        bytecode=data.get("bytecode", "0x"),
        link_references=data.get("linkReferences", {}),
    )


def parse_debug_file(file_path: Path) -> str:
    """
    Get the build info reference stored in an artifact debug file.

    Args:
        file_path: Path to artifacts/{artifact_id}.dbg.json

    Returns:
        Build info path relative to the debug file's directory,
        e.g., "../build-info/<hash>.json"

    Raises:
        ArtifactNotFoundError: If the file doesn't exist
        KeyError: If the buildInfo field is missing
    """
    data = _read_json(file_path)
    return data["buildInfo"]


def parse_build_info(file_path: Path) -> BuildInfo:
    """
    Parse a build info JSON file.

    Args:
        file_path: Path to build-info/{id}.json

    Returns:
        BuildInfo with the raw compiler input

    Raises:
        ArtifactNotFoundError: If the file doesn't exist
        KeyError: If solcLongVersion or input is missing
    """
    data = _read_json(file_path)

    return BuildInfo(
        # Older build infos don't record their id, the file is named after it
        id=data.get("id", file_path.stem),
        solc_version=data.get("solcVersion", ""),
        solc_long_version=data["solcLongVersion"],
        input=data["input"],
    )
