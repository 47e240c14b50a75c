"""Shared pytest fixtures for ignition-verify tests."""

import copy
import json
from pathlib import Path
from typing import Any, Dict, List

import pytest

from ignition_verify.types import Artifact, BuildInfo

CHAIN_ID = 11155111
BUILD_INFO_ID = "b9e1b2a8d3c4f5e6"

MATH_LIB_ADDRESS = "0x1111111111111111111111111111111111111111"
LOCK_ADDRESS = "0x3333333333333333333333333333333333333333"
OWNER_ADDRESS = "0x2222222222222222222222222222222222222222"
UNLOCK_TIME = 1700000000

SOURCES = {
    "contracts/Lock.sol": (
        "// SPDX-License-Identifier: MIT\n"
        "pragma solidity ^0.8.19;\n"
        'import "./lib/MathLib.sol";\n'
        'import {Ownable} from "@openzeppelin/contracts/access/Ownable.sol";\n'
        "contract Lock is Ownable {\n"
        "    uint256 public unlockTime;\n"
        "    constructor(uint256 _unlockTime, address owner) Ownable(owner) {\n"
        "        unlockTime = MathLib.add(_unlockTime, 0);\n"
        "    }\n"
        "}\n"
    ),
    "contracts/lib/MathLib.sol": (
        "pragma solidity ^0.8.19;\n"
        "library MathLib {\n"
        "    function add(uint256 a, uint256 b) public pure returns (uint256) { return a + b; }\n"
        "}\n"
    ),
    "@openzeppelin/contracts/access/Ownable.sol": (
        "pragma solidity ^0.8.19;\n"
        'import "../utils/Context.sol";\n'
        "abstract contract Ownable is Context {\n"
        "    constructor(address initialOwner) {}\n"
        "}\n"
    ),
    "@openzeppelin/contracts/utils/Context.sol": (
        "pragma solidity ^0.8.19;\n"
        "abstract contract Context {}\n"
    ),
    "contracts/Counter.sol": (
        "pragma solidity ^0.8.19;\n"
        "contract Counter { uint256 public x; }\n"
    ),
}

LOCK_ABI = [
    {
        "type": "constructor",
        "stateMutability": "nonpayable",
        "inputs": [
            {"name": "_unlockTime", "type": "uint256", "internalType": "uint256"},
            {"name": "owner", "type": "address", "internalType": "address"},
        ],
    },
    {
        "type": "function",
        "name": "unlockTime",
        "stateMutability": "view",
        "inputs": [],
        "outputs": [{"name": "", "type": "uint256", "internalType": "uint256"}],
    },
]

ARTIFACTS = {
    "LockModule#MathLib": {
        "_format": "hh-sol-artifact-1",
        "contractName": "MathLib",
        "sourceName": "contracts/lib/MathLib.sol",
        "abi": [],
        "bytecode": "0x6080",
        "linkReferences": {},
    },
    "LockModule#Lock": {
        "_format": "hh-sol-artifact-1",
        "contractName": "Lock",
        "sourceName": "contracts/Lock.sol",
        "abi": LOCK_ABI,
        "bytecode": "0x6080__$abc$__",
        "linkReferences": {
            "contracts/lib/MathLib.sol": {"MathLib": [{"length": 20, "start": 120}]}
        },
    },
    "LockModule#Counter": {
        "_format": "hh-sol-artifact-1",
        "contractName": "Counter",
        "sourceName": "contracts/Counter.sol",
        "abi": [],
        "bytecode": "0x6080",
        "linkReferences": {},
    },
}


def bigint(value: int) -> Dict[str, str]:
    """Journal serialization of a bigint."""
    return {"_kind": "bigint", "value": str(value)}


def deployment_messages(
    math_lib_address: str = MATH_LIB_ADDRESS,
) -> List[Dict[str, Any]]:
    """Journal of a deployment: MathLib and Lock succeed, Counter reverts."""
    return [
        {"type": "RUN_START", "chainId": CHAIN_ID},
        {"type": "DEPLOYMENT_INITIALIZE", "chainId": CHAIN_ID},
        {
            "type": "DEPLOYMENT_EXECUTION_STATE_INITIALIZE",
            "futureId": "LockModule#MathLib",
            "futureType": "LIBRARY_DEPLOYMENT",
            "artifactId": "LockModule#MathLib",
            "contractName": "MathLib",
            "constructorArgs": [],
            "libraries": {},
            "value": bigint(0),
        },
        {
            "type": "DEPLOYMENT_EXECUTION_STATE_COMPLETE",
            "futureId": "LockModule#MathLib",
            "result": {"type": "SUCCESS", "address": math_lib_address},
        },
        {
            "type": "DEPLOYMENT_EXECUTION_STATE_INITIALIZE",
            "futureId": "LockModule#Lock",
            "futureType": "NAMED_ARTIFACT_CONTRACT_DEPLOYMENT",
            "artifactId": "LockModule#Lock",
            "contractName": "Lock",
            "constructorArgs": [bigint(UNLOCK_TIME), OWNER_ADDRESS],
            "libraries": {"MathLib": math_lib_address},
            "value": bigint(0),
        },
        {
            "type": "DEPLOYMENT_EXECUTION_STATE_COMPLETE",
            "futureId": "LockModule#Lock",
            "result": {"type": "SUCCESS", "address": LOCK_ADDRESS},
        },
        {
            "type": "CALL_EXECUTION_STATE_INITIALIZE",
            "futureId": "LockModule#Lock.withdraw",
            "functionName": "withdraw",
            "args": [],
        },
        {
            "type": "CALL_EXECUTION_STATE_COMPLETE",
            "futureId": "LockModule#Lock.withdraw",
            "result": {"type": "SUCCESS", "value": None},
        },
        {
            "type": "DEPLOYMENT_EXECUTION_STATE_INITIALIZE",
            "futureId": "LockModule#Counter",
            "futureType": "NAMED_ARTIFACT_CONTRACT_DEPLOYMENT",
            "artifactId": "LockModule#Counter",
            "contractName": "Counter",
            "constructorArgs": [],
            "libraries": {},
            "value": bigint(0),
        },
        {
            "type": "DEPLOYMENT_EXECUTION_STATE_COMPLETE",
            "futureId": "LockModule#Counter",
            "result": {"type": "REVERTED_TRANSACTION", "error": "reverted"},
        },
    ]


def write_journal(deployment_dir: Path, messages: List[Dict[str, Any]]) -> Path:
    """Write journal messages as JSON lines."""
    journal_path = deployment_dir / "journal.jsonl"
    with open(journal_path, "w") as f:
        for message in messages:
            f.write(json.dumps(message) + "\n")
    return journal_path


@pytest.fixture
def compiler_input() -> Dict[str, Any]:
    """Standard-json compiler input holding all sample sources."""
    return {
        "language": "Solidity",
        "sources": {name: {"content": content} for name, content in SOURCES.items()},
        "settings": {
            "optimizer": {"enabled": True, "runs": 200},
            "outputSelection": {"*": {"*": ["abi", "evm.bytecode"]}},
        },
    }


@pytest.fixture
def build_info(compiler_input: Dict[str, Any]) -> BuildInfo:
    """BuildInfo of the sample build."""
    return BuildInfo(
        id=BUILD_INFO_ID,
        solc_version="0.8.19",
        solc_long_version="0.8.19+commit.7dd6d404",
        input=compiler_input,
    )


@pytest.fixture
def lock_artifact() -> Artifact:
    """Artifact of Lock, which links MathLib."""
    data = ARTIFACTS["LockModule#Lock"]
    return Artifact(
        contract_name=data["contractName"],
        source_name=data["sourceName"],
        abi=data["abi"],
        bytecode=data["bytecode"],
        link_references=data["linkReferences"],
    )


@pytest.fixture
def deployment_dir(tmp_path: Path, compiler_input: Dict[str, Any]) -> Path:
    """Create a complete deployment directory with sample data."""
    deployment_dir = tmp_path / "ignition" / "deployments" / f"chain-{CHAIN_ID}"
    artifacts_dir = deployment_dir / "artifacts"
    build_info_dir = deployment_dir / "build-info"
    artifacts_dir.mkdir(parents=True)
    build_info_dir.mkdir(parents=True)

    with open(build_info_dir / f"{BUILD_INFO_ID}.json", "w") as f:
        json.dump(
            {
                "_format": "hh-sol-build-info-1",
                "id": BUILD_INFO_ID,
                "solcVersion": "0.8.19",
                "solcLongVersion": "0.8.19+commit.7dd6d404",
                "input": copy.deepcopy(compiler_input),
                "output": {},
            },
            f,
        )

    for artifact_id, artifact in ARTIFACTS.items():
        with open(artifacts_dir / f"{artifact_id}.json", "w") as f:
            json.dump(artifact, f)
        with open(artifacts_dir / f"{artifact_id}.dbg.json", "w") as f:
            json.dump(
                {"_format": "hh-sol-dbg-1", "buildInfo": f"../build-info/{BUILD_INFO_ID}.json"},
                f,
            )

    write_journal(deployment_dir, deployment_messages())
    return deployment_dir
