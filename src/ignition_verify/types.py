"""Data types and dataclasses for ignition-verify library."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple, Union

from eth_typing import HexAddress


class ExecutionStateType(Enum):
    """Kinds of execution state recorded in a deployment journal."""

    DEPLOYMENT_EXECUTION_STATE = "DEPLOYMENT_EXECUTION_STATE"
    CALL_EXECUTION_STATE = "CALL_EXECUTION_STATE"
    STATIC_CALL_EXECUTION_STATE = "STATIC_CALL_EXECUTION_STATE"
    ENCODE_FUNCTION_CALL_EXECUTION_STATE = "ENCODE_FUNCTION_CALL_EXECUTION_STATE"
    CONTRACT_AT_EXECUTION_STATE = "CONTRACT_AT_EXECUTION_STATE"
    READ_EVENT_ARGUMENT_EXECUTION_STATE = "READ_EVENT_ARGUMENT_EXECUTION_STATE"
    SEND_DATA_EXECUTION_STATE = "SEND_DATA_EXECUTION_STATE"


class ExecutionStatus(Enum):
    STARTED = "STARTED"
    TIMEOUT = "TIMEOUT"
    SUCCESS = "SUCCESS"
    HELD = "HELD"
    FAILED = "FAILED"


class ExecutionResultType(Enum):
    SUCCESS = "SUCCESS"
    REVERTED_TRANSACTION = "REVERTED_TRANSACTION"
    STATIC_CALL_ERROR = "STATIC_CALL_ERROR"
    SIMULATION_ERROR = "SIMULATION_ERROR"
    STRATEGY_ERROR = "STRATEGY_ERROR"
    STRATEGY_SIMULATION_ERROR = "STRATEGY_SIMULATION_ERROR"
    STRATEGY_HELD = "STRATEGY_HELD"


@dataclass(frozen=True)
class ChainConfig:
    """Verifier endpoint configuration for one chain."""

    network: str  # e.g., "sepolia"
    chain_id: int
    api_url: str  # Verifier API endpoint
    browser_url: str  # Block explorer front end


@dataclass
class ExecutionResult:
    """Outcome of a completed execution state."""

    type: ExecutionResultType
    address: Optional[HexAddress] = None  # Only set for successful deployments


@dataclass
class ExecutionState:
    """Any journaled execution state (deployment, call, read, ...)."""

    id: str  # Future id, e.g., "LockModule#Lock"
    type: ExecutionStateType
    status: ExecutionStatus


@dataclass
class DeploymentExecutionState(ExecutionState):
    """A contract deployment and its outcome."""

    artifact_id: str = ""
    contract_name: str = ""
    constructor_args: List[Any] = field(default_factory=list)
    libraries: Dict[str, str] = field(default_factory=dict)  # Library name -> address
    result: Optional[ExecutionResult] = None


@dataclass
class DeploymentState:
    """Replayed state of one deployment directory."""

    chain_id: int
    # Insertion ordered: future id -> state
    execution_states: Dict[str, Union[ExecutionState, DeploymentExecutionState]] = field(
        default_factory=dict
    )


@dataclass
class BuildInfo:
    """Compiler invocation record for one build."""

    id: str
    solc_version: str
    solc_long_version: str  # e.g., "0.8.19+commit.7dd6d404"
    input: Dict[str, Any]  # Full standard-json compiler input


@dataclass
class Artifact:
    """Compiled output of one contract."""

    contract_name: str
    source_name: str  # e.g., "contracts/Lock.sol"
    abi: List[Dict[str, Any]]
    bytecode: str
    # Source name -> library name -> placeholder positions
    link_references: Dict[str, Dict[str, Any]] = field(default_factory=dict)


@dataclass
class VerifyInfo:
    """Everything a verifier needs for one deployed contract."""

    address: str
    compiler_version: str  # Always starts with "v"
    source_code: str  # JSON-serialized compiler input
    name: str  # "<sourceName>:<contractName>"
    args: str  # ABI-encoded constructor arguments, hex without 0x


# Source name -> library name -> address
SourceToLibraryToAddress = Dict[str, Dict[str, str]]

VerifyResult = Tuple[ChainConfig, VerifyInfo]
