"""
abstract-impulse-nft: deployment, minting and front-end sync scripts for AbstractImpulseNFT
"""

from importlib.metadata import PackageNotFoundError, version

from .config import load_config
from .deploy import deploy_contract
from .deployments import DeploymentManager
from .exceptions import (
    ArtifactNotFoundError,
    ConfigurationError,
    ContractNotFoundError,
    DefectiveDeploymentError,
    DeploymentError,
    EventNotFoundError,
    NetworkNotFoundError,
    RegistryError,
    TransactionFailedError,
    VerificationError,
)
from .frontend import update_front_end
from .mint import mint_nft
from .types import DeploymentRecord, MintResult, ScriptConfig, VerificationResult

try:
    __version__ = version("abstract-impulse-nft")
except PackageNotFoundError:
    __version__ = None

__all__ = [
    "DeploymentManager",
    "load_config",
    "deploy_contract",
    "mint_nft",
    "update_front_end",
    "ScriptConfig",
    "DeploymentRecord",
    "MintResult",
    "VerificationResult",
    "DeploymentError",
    "ConfigurationError",
    "NetworkNotFoundError",
    "ArtifactNotFoundError",
    "ContractNotFoundError",
    "DefectiveDeploymentError",
    "TransactionFailedError",
    "EventNotFoundError",
    "VerificationError",
    "RegistryError",
]
