"""Data types and dataclasses for abstract-impulse-nft scripts."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass(frozen=True)
class ScriptConfig:
    """Settings every script receives at its entry point."""

    network: str  # e.g. "sepolia"
    is_development_network: bool
    chain_id: int
    rpc_url: str
    block_confirmations: int = 1
    explorer_api_key: Optional[str] = None
    explorer_api_url: Optional[str] = None
    update_front_end: bool = False
    front_end_dir: Optional[str] = None
    private_key: Optional[str] = field(default=None, repr=False)


@dataclass
class DeploymentRecord:
    """A deployed contract as recorded under deployments/<network>/."""

    # Required fields
    contract_name: str
    address: str  # Checksummed address
    network: str
    chain_id: int
    abi: List[Dict[str, Any]]

    # Optional fields (hardhat-deploy)
    transaction_hash: Optional[str] = None
    block: Optional[int] = None
    gas_used: Optional[int] = None
    constructor_args: List[Any] = field(default_factory=list)
    bytecode: Optional[str] = None
    deployed_bytecode: Optional[str] = None
    num_deployments: int = 1


@dataclass(frozen=True)
class MintResult:
    """Values read back from the events of a mint transaction."""

    minter: str
    token_uri: str
    token_id: int


@dataclass(frozen=True)
class VerificationResult:
    """Outcome of a best-effort block explorer verification."""

    address: str
    success: bool
    message: str
    guid: Optional[str] = None
