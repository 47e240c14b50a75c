"""Path management utilities for ignition-verify library."""

import os
from pathlib import Path
from typing import Optional, Union

from .constants import (
    ARTIFACTS_DIRNAME,
    BUILD_INFO_DIRNAME,
    DEPLOYMENTS_DIR_ENV,
    JOURNAL_FILENAME,
)


def get_default_deployments_dir() -> Path:
    """
    Get default deployments root.

    Returns:
        $IGNITION_DEPLOYMENTS_DIR if set, else ./ignition/deployments
    """
    env_dir = os.environ.get(DEPLOYMENTS_DIR_ENV)
    if env_dir:
        return Path(env_dir).absolute()

    return Path.cwd() / "ignition" / "deployments"


def resolve_deployment_dir(
    deployment_id: str, deployments_root: Optional[Union[Path, str]] = None
) -> Path:
    """
    Get the directory of a named deployment.

    Args:
        deployment_id: Deployment id, e.g., "chain-11155111"
        deployments_root: Custom deployments root (defaults to ./ignition/deployments)

    Returns:
        Absolute path to the deployment directory
    """
    if deployments_root is None:
        deployments_root = get_default_deployments_dir()
    else:
        deployments_root = Path(deployments_root).absolute()

    return deployments_root / deployment_id


def get_deployment_paths(deployment_dir: Union[Path, str]) -> tuple[Path, Path, Path]:
    """
    Get the storage locations inside a deployment directory.

    Args:
        deployment_dir: Deployment directory

    Returns:
        Tuple of (journal_path, artifacts_dir, build_info_dir)
    """
    deployment_dir = Path(deployment_dir)

    return (
        deployment_dir / JOURNAL_FILENAME,
        deployment_dir / ARTIFACTS_DIRNAME,
        deployment_dir / BUILD_INFO_DIRNAME,
    )
