"""Library linking and compiler input preparation for ignition-verify library."""

import logging
from typing import Any, Dict, Mapping, Optional

from .exceptions import assert_invariant
from .types import Artifact, BuildInfo, SourceToLibraryToAddress

logger = logging.getLogger(__name__)


def resolve_library_info_for_artifact(
    artifact: Artifact, libraries: Mapping[str, str]
) -> Optional[SourceToLibraryToAddress]:
    """
    Map an artifact's link references to deployed library addresses.

    Args:
        artifact: Artifact whose link references need addresses
        libraries: Library name -> address, as recorded at deploy time

    Returns:
        Source name -> library name -> address,
        or None if the artifact links no libraries

    Raises:
        InternalInvariantError: If a referenced library has no recorded address
    """
    source_to_library_to_address: SourceToLibraryToAddress = {}

    for source_name, references in artifact.link_references.items():
        for library_name in references:
            library_address = libraries.get(library_name)
            assert_invariant(
                library_address is not None,
                f"Could not find address for library {library_name}",
            )

            source_to_library_to_address.setdefault(source_name, {})[library_name] = (
                library_address
            )

    if not source_to_library_to_address:
        return None

    return source_to_library_to_address


def copy_compiler_input(compiler_input: Dict[str, Any]) -> Dict[str, Any]:
    """
    Copy a compiler input deep enough to prune sources and replace settings.

    Source contents and other leaf values are shared with the original.
    """
    working_copy = dict(compiler_input)
    working_copy["sources"] = dict(compiler_input.get("sources", {}))
    working_copy["settings"] = dict(compiler_input.get("settings", {}))
    return working_copy


def prepare_input(
    build_info: BuildInfo, artifact: Artifact, libraries: Mapping[str, str]
) -> Dict[str, Any]:
    """
    Build the compiler input for verifying one artifact.

    Args:
        build_info: Build info the artifact was compiled in
        artifact: Artifact being verified
        libraries: Library name -> address, as recorded at deploy time

    Returns:
        Working copy of build_info.input, with settings.libraries replaced
        by the artifact's resolved libraries when it links any.
        build_info.input itself is left untouched.
    """
    compiler_input = copy_compiler_input(build_info.input)

    source_to_library_to_address = resolve_library_info_for_artifact(artifact, libraries)
    if source_to_library_to_address is None:
        return compiler_input

    logger.debug(
        "Linking %s with libraries %s",
        artifact.contract_name,
        source_to_library_to_address,
    )
    compiler_input["settings"]["libraries"] = source_to_library_to_address

    return compiler_input
