"""Main API for ignition-verify library."""

import json
import logging
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Iterator, List, Optional, Sequence, Union

from .abi import encode_deployment_arguments
from .chains import resolve_chain_config
from .exceptions import (
    NoContractsDeployedError,
    UninitializedDeploymentError,
    assert_invariant,
)
from .imports import ImportAnalyzer, analyze_imports, import_closure
from .libraries import prepare_input
from .loader import DeploymentLoader, FileDeploymentLoader
from .types import (
    ChainConfig,
    DeploymentExecutionState,
    DeploymentState,
    ExecutionResultType,
    ExecutionStateType,
    ExecutionStatus,
    VerifyInfo,
    VerifyResult,
)
from .versions import normalize_compiler_version

logger = logging.getLogger(__name__)


def find_successful_deployments(
    deployment_state: DeploymentState,
) -> List[DeploymentExecutionState]:
    """
    Get the deployment execution states that completed successfully.

    Args:
        deployment_state: Replayed deployment state

    Returns:
        Successful DeploymentExecutionStates, in deployment state order
    """
    return [
        ex_state
        for ex_state in deployment_state.execution_states.values()
        if ex_state.type is ExecutionStateType.DEPLOYMENT_EXECUTION_STATE
        and ex_state.status is ExecutionStatus.SUCCESS
    ]


def get_verification_information(
    deployment_dir: Union[Path, str],
    custom_chains: Sequence[ChainConfig] = (),
    include_unrelated_contracts: bool = False,
    loader: Optional[DeploymentLoader] = None,
) -> Iterator[VerifyResult]:
    """
    Retrieve the information required to verify every contract of a deployment.

    The deployment state is loaded and checked immediately; each contract's
    verification info is only computed when the returned iterator reaches it.

    Args:
        deployment_dir: Deployment directory
        custom_chains: Chain configurations searched before the built-in ones
        include_unrelated_contracts: Keep every source of the build instead of
                                     only the contract's import closure
        loader: Deployment loader (defaults to FileDeploymentLoader(deployment_dir))

    Returns:
        Iterator of (ChainConfig, VerifyInfo), one per deployed contract,
        in the order the contracts appear in the deployment state

    Raises:
        UninitializedDeploymentError: If the directory holds no deployment
        UnsupportedChainError: If the deployment's chain has no configuration
        NoContractsDeployedError: If no contract deployment succeeded
    """
    if loader is None:
        loader = FileDeploymentLoader(deployment_dir)

    deployment_state = loader.load_deployment_state()
    if deployment_state is None:
        raise UninitializedDeploymentError(
            f"Cannot verify contracts for nonexistent deployment at {deployment_dir}"
        )

    chain_config = resolve_chain_config(deployment_state.chain_id, custom_chains)

    deployment_ex_states = find_successful_deployments(deployment_state)
    if not deployment_ex_states:
        raise NoContractsDeployedError(
            f"Cannot verify deployment {deployment_dir} as no contracts were deployed"
        )

    logger.debug(
        "Found %d deployed contracts to verify on %s",
        len(deployment_ex_states),
        chain_config.network,
    )

    return _iter_verify_results(
        chain_config, deployment_ex_states, loader, include_unrelated_contracts
    )


def _iter_verify_results(
    chain_config: ChainConfig,
    deployment_ex_states: List[DeploymentExecutionState],
    loader: DeploymentLoader,
    include_unrelated_contracts: bool,
) -> Iterator[VerifyResult]:
    for ex_state in deployment_ex_states:
        verify_info = convert_execution_state(ex_state, loader, include_unrelated_contracts)
        yield chain_config, verify_info


def convert_execution_state(
    ex_state: DeploymentExecutionState,
    loader: DeploymentLoader,
    include_unrelated_contracts: bool = False,
    import_analyzer: ImportAnalyzer = analyze_imports,
) -> VerifyInfo:
    """
    Build the verification info of one deployed contract.

    Args:
        ex_state: Successful deployment execution state
        loader: Deployment loader to read build info and artifact from
        include_unrelated_contracts: Keep every source of the build
        import_analyzer: Returns the import paths of a source text

    Returns:
        VerifyInfo for the contract

    Raises:
        InternalInvariantError: If the state has no successful result, or a
                                linked library or imported source is missing
    """
    with ThreadPoolExecutor(max_workers=2) as pool:
        build_info_future = pool.submit(loader.read_build_info, ex_state.artifact_id)
        artifact_future = pool.submit(loader.load_artifact, ex_state.artifact_id)
        build_info = build_info_future.result()
        artifact = artifact_future.result()

    assert_invariant(
        ex_state.result is not None and ex_state.result.type is ExecutionResultType.SUCCESS,
        f"Deployment execution state {ex_state.id} should have a successful result "
        "to retrieve address",
    )

    source_code = prepare_input(build_info, artifact, ex_state.libraries)

    if not include_unrelated_contracts:
        source_names = {artifact.source_name} | import_closure(
            artifact.source_name, build_info, import_analyzer
        )
        pruned = [name for name in source_code["sources"] if name not in source_names]
        for name in pruned:
            del source_code["sources"][name]

        logger.debug("Pruned %d unrelated sources for %s", len(pruned), ex_state.id)

    return VerifyInfo(
        address=ex_state.result.address,
        compiler_version=normalize_compiler_version(build_info.solc_long_version),
        source_code=json.dumps(source_code, separators=(",", ":"), ensure_ascii=False),
        name=f"{artifact.source_name}:{ex_state.contract_name}",
        args=encode_deployment_arguments(artifact, ex_state.constructor_args),
    )
