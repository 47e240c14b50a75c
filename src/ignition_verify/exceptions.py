"""Custom exception classes for ignition-verify library."""


class VerificationError(Exception):
    """Base exception for verification-related errors."""

    pass


class UninitializedDeploymentError(VerificationError, FileNotFoundError):
    """Raised when no deployment state exists in the deployment directory."""

    pass


class UnsupportedChainError(VerificationError, ValueError):
    """Raised when the deployment's chain id matches no chain configuration."""

    pass


class NoContractsDeployedError(VerificationError, ValueError):
    """Raised when a deployment has no successfully deployed contracts."""

    pass


class InvalidChainConfigError(VerificationError, ValueError):
    """Raised when a custom chain configuration entry is malformed."""

    pass


class ArtifactNotFoundError(VerificationError, FileNotFoundError):
    """Raised when an artifact or build info file is missing from a deployment."""

    pass


class JournalParseError(VerificationError, ValueError):
    """Raised when a deployment journal line cannot be decoded."""

    pass


class InternalInvariantError(AssertionError):
    """
    Raised when deployment state contradicts itself.

    Not a VerificationError: this signals corrupted state upstream, never bad
    user input, and must abort the run.
    """

    pass


def assert_invariant(condition: bool, message: str) -> None:
    """
    Raise InternalInvariantError if condition does not hold.

    Args:
        condition: Invariant that must be true
        message: Description of the violated invariant

    Raises:
        InternalInvariantError: If condition is false
    """
    if not condition:
        raise InternalInvariantError(f"Internal invariant was violated: {message}")
