"""Solidity import analysis for ignition-verify library."""

import logging
import posixpath
import re
from typing import Callable, List, Set

from .exceptions import assert_invariant
from .types import BuildInfo

logger = logging.getLogger(__name__)

ImportAnalyzer = Callable[[str], List[str]]

# One left-to-right pass: whichever of string or comment starts first wins
_STRING_OR_COMMENT = re.compile(
    r"""(?P<string>"(?:\\.|[^"\\\n])*"|'(?:\\.|[^'\\\n])*')|//[^\n]*|/\*.*?\*/""",
    re.DOTALL,
)

# String literals are replaced by \x00<index>\x00 before matching.
# Covers: import "p"; import "p" as X; import * as X from "p"; import {A, B as C} from "p";
_IMPORT_DIRECTIVE = re.compile(
    r"\bimport\s+(?:[^;\x00]*?\bfrom\s+)?\x00(?P<index>\d+)\x00",
)

_RELATIVE_IMPORT = re.compile(r"^\.\.?[/\\]")


def analyze_imports(source_text: str) -> List[str]:
    """
    List the import paths of a Solidity source file.

    Comments are dropped and string literals are masked, so neither can
    contribute or hide an import directive.

    Args:
        source_text: Solidity source code

    Returns:
        Import paths exactly as written, in source order
    """
    literals: List[str] = []

    def mask(match: "re.Match[str]") -> str:
        literal = match.group("string")
        if literal is None:
            return " "
        literals.append(literal[1:-1])
        return f"\x00{len(literals) - 1}\x00"

    code = _STRING_OR_COMMENT.sub(mask, source_text)
    return [literals[int(m.group("index"))] for m in _IMPORT_DIRECTIVE.finditer(code)]


def resolve_import_path(importer: str, import_path: str) -> str:
    """
    Convert an import path into the source name the compiler uses for it.

    Relative imports ("./x", "../x", either separator) are resolved against the
    importer's directory. Anything else is already a source name.

    Args:
        importer: Source name of the importing file
        import_path: Path as written in the import directive

    Returns:
        Source name with '/' separators
    """
    if not _RELATIVE_IMPORT.match(import_path):
        return import_path

    joined = posixpath.join(posixpath.dirname(importer), import_path.replace("\\", "/"))
    parts = posixpath.normpath(joined).split("/")

    # Source names are rooted: '..' above the root has nowhere to go
    while parts and parts[0] == "..":
        parts.pop(0)

    return "/".join(parts)


def import_closure(
    source_name: str,
    build_info: BuildInfo,
    analyzer: ImportAnalyzer = analyze_imports,
) -> Set[str]:
    """
    Compute every source transitively imported by a source file.

    Args:
        source_name: Root source name, e.g., "contracts/Lock.sol"
        build_info: Build info whose input holds all compiled sources
        analyzer: Returns the import paths of a source text

    Returns:
        Set of source names, not including source_name itself

    Raises:
        InternalInvariantError: If an imported source is absent from the build input
    """
    sources = build_info.input["sources"]
    visited = {source_name}
    pending = [source_name]

    while pending:
        current = pending.pop()
        assert_invariant(
            current in sources,
            f"Source {current} not found in build info {build_info.id}",
        )

        for import_path in analyzer(sources[current]["content"]):
            resolved = resolve_import_path(current, import_path)
            if resolved not in visited:
                visited.add(resolved)
                pending.append(resolved)

    visited.discard(source_name)
    logger.debug("Source %s imports %d files", source_name, len(visited))
    return visited
