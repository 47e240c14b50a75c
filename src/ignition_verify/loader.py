"""Deployment storage access for ignition-verify library."""

import logging
from pathlib import Path
from typing import Optional, Protocol, Union

from .journal import load_deployment_state
from .parsers import parse_artifact, parse_build_info, parse_debug_file
from .paths import get_deployment_paths
from .types import Artifact, BuildInfo, DeploymentState

logger = logging.getLogger(__name__)


class DeploymentLoader(Protocol):
    """Read access to a deployment's persisted state and artifacts."""

    def load_deployment_state(self) -> Optional[DeploymentState]: ...

    def read_build_info(self, artifact_id: str) -> BuildInfo: ...

    def load_artifact(self, artifact_id: str) -> Artifact: ...


class FileDeploymentLoader:
    """Loads a deployment stored in a deployment directory."""

    def __init__(self, deployment_dir: Union[Path, str]):
        """
        Args:
            deployment_dir: Directory holding journal.jsonl, artifacts/ and build-info/
        """
        self.deployment_dir = Path(deployment_dir)
        self._journal_path, self._artifacts_dir, _ = get_deployment_paths(self.deployment_dir)

    def load_deployment_state(self) -> Optional[DeploymentState]:
        """
        Replay the deployment journal.

        Returns:
            DeploymentState, or None if the deployment was never initialized
        """
        logger.debug("Loading deployment state from %s", self._journal_path)
        return load_deployment_state(self._journal_path)

    def load_artifact(self, artifact_id: str) -> Artifact:
        """
        Load the artifact stored for a future.

        Raises:
            ArtifactNotFoundError: If artifacts/{artifact_id}.json doesn't exist
        """
        return parse_artifact(self._artifacts_dir / f"{artifact_id}.json")

    def read_build_info(self, artifact_id: str) -> BuildInfo:
        """
        Load the build info an artifact was compiled in.

        The artifact's debug file points at the build info file.

        Raises:
            ArtifactNotFoundError: If the debug file or build info doesn't exist
        """
        build_info_ref = parse_debug_file(self._artifacts_dir / f"{artifact_id}.dbg.json")
        return parse_build_info((self._artifacts_dir / build_info_ref).resolve())
