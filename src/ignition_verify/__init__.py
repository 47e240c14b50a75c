"""
ignition-verify: Python library preparing block explorer verification payloads
for Hardhat Ignition deployments
"""

import logging
from importlib.metadata import PackageNotFoundError, version

from .chains import load_custom_chains, resolve_chain_config
from .exceptions import (
    ArtifactNotFoundError,
    InternalInvariantError,
    InvalidChainConfigError,
    JournalParseError,
    NoContractsDeployedError,
    UninitializedDeploymentError,
    UnsupportedChainError,
    VerificationError,
)
from .loader import DeploymentLoader, FileDeploymentLoader
from .types import ChainConfig, VerifyInfo, VerifyResult
from .verify import convert_execution_state, get_verification_information

logging.getLogger(__name__).addHandler(logging.NullHandler())

try:
    __version__ = version("ignition-verify")
except PackageNotFoundError:
    __version__ = None

__all__ = [
    "get_verification_information",
    "convert_execution_state",
    "resolve_chain_config",
    "load_custom_chains",
    "DeploymentLoader",
    "FileDeploymentLoader",
    "ChainConfig",
    "VerifyInfo",
    "VerifyResult",
    "VerificationError",
    "UninitializedDeploymentError",
    "UnsupportedChainError",
    "NoContractsDeployedError",
    "InvalidChainConfigError",
    "ArtifactNotFoundError",
    "JournalParseError",
    "InternalInvariantError",
]
