"""Custom exception classes for abstract-impulse-nft scripts."""


class DeploymentError(Exception):
    """Base exception for deployment, minting and front-end sync errors."""

    pass


class ConfigurationError(DeploymentError, ValueError):
    """Raised when required configuration (RPC URL, signer) is missing or invalid."""

    pass


class NetworkNotFoundError(DeploymentError, ValueError):
    """Raised when requested network is not in the network table."""

    pass


class ArtifactNotFoundError(DeploymentError, FileNotFoundError):
    """Raised when a compiled Hardhat artifact is not found."""

    pass


class ContractNotFoundError(DeploymentError, FileNotFoundError):
    """Raised when no deployment record exists for the requested contract."""

    pass


class DefectiveDeploymentError(DeploymentError, ValueError):
    """Raised when a deployment record is missing its address or ABI."""

    pass


class TransactionFailedError(DeploymentError, RuntimeError):
    """Raised when a transaction is mined with a failed status."""

    pass


class EventNotFoundError(DeploymentError, ValueError):
    """Raised when an expected event is not found in a transaction receipt."""

    pass


class VerificationError(DeploymentError, RuntimeError):
    """Raised when the block explorer rejects or cannot process a verification."""

    pass


class RegistryError(DeploymentError, ValueError):
    """Raised when the front-end contract address registry is malformed."""

    pass
