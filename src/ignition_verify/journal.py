"""Deployment journal replay for ignition-verify library."""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional

from .constants import (
    DEPLOYMENT_INITIALIZE,
    EXECUTION_STATE_COMPLETE_SUFFIX,
    EXECUTION_STATE_INITIALIZE_SUFFIX,
    INSTANTLY_SUCCESSFUL_PREFIXES,
    MESSAGE_PREFIX_TO_STATE_TYPE,
    WIPE_APPLY,
)
from .exceptions import JournalParseError
from .types import (
    DeploymentExecutionState,
    DeploymentState,
    ExecutionResult,
    ExecutionResultType,
    ExecutionState,
    ExecutionStateType,
    ExecutionStatus,
)

logger = logging.getLogger(__name__)


def _decode_bigints(obj: Dict[str, Any]) -> Any:
    """json object_hook turning {"_kind": "bigint", "value": "..."} into int."""
    if obj.get("_kind") == "bigint" and "value" in obj:
        return int(obj["value"])
    return obj


def read_journal(journal_path: Path) -> Iterator[Dict[str, Any]]:
    """
    Read journal messages in the order they were written.

    Args:
        journal_path: Path to journal.jsonl

    Yields:
        One decoded message per non-blank line

    Raises:
        JournalParseError: If a line is not a JSON object
    """
    with open(journal_path) as f:
        for line_number, line in enumerate(f, start=1):
            if not line.strip():
                continue

            try:
                message = json.loads(line, object_hook=_decode_bigints)
            except json.JSONDecodeError as e:
                raise JournalParseError(
                    f"Invalid journal entry at {journal_path}:{line_number}: {e}"
                ) from e

            if not isinstance(message, dict) or "type" not in message:
                raise JournalParseError(
                    f"Journal entry without message type at {journal_path}:{line_number}"
                )

            yield message


def _initialize_execution_state(
    prefix: str, message: Dict[str, Any]
) -> ExecutionState:
    state_type = ExecutionStateType(MESSAGE_PREFIX_TO_STATE_TYPE[prefix])
    status = (
        ExecutionStatus.SUCCESS
        if prefix in INSTANTLY_SUCCESSFUL_PREFIXES
        else ExecutionStatus.STARTED
    )

    if state_type is not ExecutionStateType.DEPLOYMENT_EXECUTION_STATE:
        return ExecutionState(id=message["futureId"], type=state_type, status=status)

    return DeploymentExecutionState(
        id=message["futureId"],
        type=state_type,
        status=status,
        artifact_id=message["artifactId"],
        contract_name=message["contractName"],
        constructor_args=message.get("constructorArgs", []),
        libraries=message.get("libraries", {}),
    )


def _complete_execution_state(state: ExecutionState, message: Dict[str, Any]) -> None:
    try:
        result = message["result"]
        result_type = ExecutionResultType(result["type"])
    except (KeyError, TypeError, ValueError) as e:
        raise JournalParseError(
            f"Invalid result for future {state.id} in journal: {message.get('result')!r}"
        ) from e

    state.status = (
        ExecutionStatus.SUCCESS
        if result_type is ExecutionResultType.SUCCESS
        else ExecutionStatus.FAILED
    )

    if isinstance(state, DeploymentExecutionState):
        state.result = ExecutionResult(type=result_type, address=result.get("address"))


def replay_journal(messages: List[Dict[str, Any]]) -> Optional[DeploymentState]:
    """
    Rebuild deployment state from journal messages.

    Only the messages verification depends on are applied: deployment
    initialization, execution state creation and completion, and wipes.

    Args:
        messages: Journal messages in write order

    Returns:
        DeploymentState, or None if the journal holds no DEPLOYMENT_INITIALIZE
    """
    state: Optional[DeploymentState] = None

    for message in messages:
        message_type: str = message["type"]

        if message_type == DEPLOYMENT_INITIALIZE:
            state = DeploymentState(chain_id=message["chainId"])
            continue

        if state is None:
            logger.debug("Ignoring %s before deployment initialization", message_type)
            continue

        if message_type == WIPE_APPLY:
            state.execution_states.pop(message["futureId"], None)

        elif message_type.endswith(EXECUTION_STATE_INITIALIZE_SUFFIX):
            prefix = message_type[: -len(EXECUTION_STATE_INITIALIZE_SUFFIX)]
            if prefix not in MESSAGE_PREFIX_TO_STATE_TYPE:
                logger.debug("Ignoring unknown journal message %s", message_type)
                continue
            ex_state = _initialize_execution_state(prefix, message)
            state.execution_states[ex_state.id] = ex_state

        elif message_type.endswith(EXECUTION_STATE_COMPLETE_SUFFIX):
            ex_state = state.execution_states.get(message["futureId"])
            if ex_state is None:
                raise JournalParseError(
                    f"Completion of unknown future {message['futureId']} in journal"
                )
            _complete_execution_state(ex_state, message)

    return state


def load_deployment_state(journal_path: Path) -> Optional[DeploymentState]:
    """
    Load deployment state from a journal file.

    Args:
        journal_path: Path to journal.jsonl

    Returns:
        DeploymentState, or None if the journal is missing or empty
    """
    if not journal_path.exists():
        return None

    return replay_journal(list(read_journal(journal_path)))
