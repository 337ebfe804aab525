"""Path management utilities for abstract-impulse-nft scripts."""

from pathlib import Path
from typing import Optional, Union

from .constants import CONTRACT_NAME


def get_default_front_end_dir() -> Path:
    """
    Get default front-end constants directory.

    Returns:
        Path to ../no-patrick-code/constants (sibling front-end checkout)
    """
    return (Path.cwd() / ".." / "no-patrick-code" / "constants").resolve()


def get_front_end_paths(
    front_end_dir: Optional[Union[Path, str]] = None,
    contract_name: str = CONTRACT_NAME,
) -> tuple[Path, Path]:
    """
    Get front-end artifact file paths.

    Args:
        front_end_dir: Custom front-end constants directory
                       (defaults to ../no-patrick-code/constants)
        contract_name: Contract whose ABI file is written

    Returns:
        Tuple of (contract_addresses_path, abi_path)
    """
    if front_end_dir is None:
        front_end_dir = get_default_front_end_dir()
    else:
        front_end_dir = Path(front_end_dir).absolute()

    contract_addresses_path = front_end_dir / "networkMapping.json"
    abi_path = front_end_dir / f"{contract_name}.json"

    return (contract_addresses_path, abi_path)


def get_artifact_path(
    contract_name: str = CONTRACT_NAME, project_root: Optional[Union[Path, str]] = None
) -> Path:
    """
    Get the Hardhat compile artifact path for a contract.

    Args:
        contract_name: Contract name (file is assumed to be <name>.sol)
        project_root: Hardhat project root (defaults to current directory)

    Returns:
        Path to artifacts/contracts/<name>.sol/<name>.json
    """
    root = Path.cwd() if project_root is None else Path(project_root).absolute()
    return root / "artifacts" / "contracts" / f"{contract_name}.sol" / f"{contract_name}.json"


def get_deployments_dir(
    network: str, project_root: Optional[Union[Path, str]] = None
) -> Path:
    """
    Get the hardhat-deploy records directory for a network.

    Args:
        network: Network name, e.g. "sepolia"
        project_root: Hardhat project root (defaults to current directory)

    Returns:
        Path to deployments/<network>
    """
    root = Path.cwd() if project_root is None else Path(project_root).absolute()
    return root / "deployments" / network
