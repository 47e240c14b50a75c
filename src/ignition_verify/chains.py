"""Chain configuration resolution for ignition-verify library."""

import json
import logging
from itertools import chain
from pathlib import Path
from typing import Any, Dict, List, Sequence, Union

from .constants import BUILTIN_CHAINS
from .exceptions import InvalidChainConfigError, UnsupportedChainError
from .types import ChainConfig

logger = logging.getLogger(__name__)


def resolve_chain_config(
    chain_id: int, custom_chains: Sequence[ChainConfig] = ()
) -> ChainConfig:
    """
    Find the verifier configuration for a chain.

    Custom chains are searched before built-in chains, so a custom entry with
    the same chain id as a built-in one replaces it.

    Args:
        chain_id: Chain id of the deployment
        custom_chains: User supplied chain configurations

    Returns:
        First ChainConfig whose chain_id matches

    Raises:
        UnsupportedChainError: If no configuration matches
    """
    for chain_config in chain(custom_chains, BUILTIN_CHAINS):
        if chain_config.chain_id == chain_id:
            logger.debug("Resolved chain %s to network '%s'", chain_id, chain_config.network)
            return chain_config

    raise UnsupportedChainError(
        f"The chain id {chain_id} is not supported. "
        "Add it as a custom chain to verify contracts deployed on it."
    )


def parse_chain_config(entry: Dict[str, Any]) -> ChainConfig:
    """
    Parse one custom chain entry.

    Args:
        entry: Dict with network, chainId and urls.apiURL / urls.browserURL

    Returns:
        ChainConfig

    Raises:
        InvalidChainConfigError: If a field is missing or has the wrong type
    """
    try:
        network = entry["network"]
        chain_id = entry["chainId"]
        urls = entry["urls"]
        api_url = urls["apiURL"]
        browser_url = urls["browserURL"]
    except (KeyError, TypeError) as e:
        raise InvalidChainConfigError(f"Custom chain is missing field {e}: {entry!r}") from e

    # bool is an int subclass
    if not isinstance(chain_id, int) or isinstance(chain_id, bool):
        raise InvalidChainConfigError(
            f"Custom chain '{network}' has non-integer chainId: {chain_id!r}"
        )

    return ChainConfig(
        network=network,
        chain_id=chain_id,
        api_url=api_url,
        browser_url=browser_url,
    )


def load_custom_chains(config_path: Union[Path, str]) -> List[ChainConfig]:
    """
    Load custom chain configurations from a JSON file.

    The file holds a list in hardhat-verify's customChains shape:
    [{"network": ..., "chainId": ..., "urls": {"apiURL": ..., "browserURL": ...}}]

    Args:
        config_path: Path to the JSON file

    Returns:
        List of ChainConfig in file order

    Raises:
        InvalidChainConfigError: If the file is not a list of valid entries
    """
    with open(config_path) as f:
        data = json.load(f)

    if not isinstance(data, list):
        raise InvalidChainConfigError(
            f"Custom chains file must contain a JSON list: {config_path}"
        )

    return [parse_chain_config(entry) for entry in data]
