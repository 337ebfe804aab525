"""Front-end synchronization for AbstractImpulseNFT.

Writes the contract ABI and the per-chain address registry that the
front-end application reads from its constants/ directory.

The two files are written one after the other without any transaction
around them. If the process dies between the writes, the ABI file and the
address registry can disagree until the next successful run.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

from .constants import CONTRACT_NAME
from .exceptions import RegistryError
from .paths import get_front_end_paths
from .types import ScriptConfig

logger = logging.getLogger(__name__)

Registry = Dict[str, Dict[str, List[str]]]


def format_abi(abi: List[Dict[str, Any]]) -> str:
    """Serialize an ABI to compact canonical JSON text."""
    return json.dumps(abi, separators=(",", ":"))


def load_contract_addresses(registry_path: Path) -> Registry:
    """
    Load the front-end address registry.

    Args:
        registry_path: Path to networkMapping.json

    Returns:
        Registry mapping chain id -> contract name -> addresses
        Empty dict if the file doesn't exist

    Raises:
        RegistryError: If the file is not valid JSON or not a JSON object
    """
    try:
        with open(registry_path) as f:
            registry = json.load(f)
    except FileNotFoundError:
        return {}
    except json.JSONDecodeError as e:
        raise RegistryError(f"Malformed address registry {registry_path}: {e}") from e

    if not isinstance(registry, dict):
        raise RegistryError(f"Address registry {registry_path} must be a JSON object")

    return registry


def save_contract_addresses(registry: Registry, registry_path: Path) -> None:
    """
    Overwrite the address registry on disk.

    Creates parent directories if they don't exist.
    """
    registry_path.parent.mkdir(parents=True, exist_ok=True)
    with open(registry_path, "w") as f:
        f.write(json.dumps(registry, separators=(",", ":")))


def add_contract_address(
    registry: Registry, chain_id: str, contract_name: str, address: str
) -> bool:
    """
    Append an address to a registry in place unless it is already listed.

    Args:
        registry: Registry to update
        chain_id: Chain id as string key
        contract_name: Contract name
        address: Deployed address

    Returns:
        True if the registry changed, False if the address was already present
    """
    if chain_id not in registry:
        registry[chain_id] = {contract_name: [address]}
        return True

    if not isinstance(registry[chain_id], dict):
        raise RegistryError(f"Registry entry for chain {chain_id} must be a JSON object")

    addresses = registry[chain_id].setdefault(contract_name, [])
    if not isinstance(addresses, list):
        raise RegistryError(
            f"Registry entry for {contract_name} on chain {chain_id} must be a JSON array"
        )

    if address in addresses:
        return False

    addresses.append(address)
    return True


def update_abi(manager, abi_path: Path, contract_name: str = CONTRACT_NAME) -> Path:
    """
    Write the deployed contract's ABI for the front-end.

    Args:
        manager: Deployment platform
        abi_path: Output file, fully overwritten
        contract_name: Contract to export

    Returns:
        Path of the written file
    """
    contract = manager.get_contract(contract_name)
    abi_path.parent.mkdir(parents=True, exist_ok=True)
    abi_path.write_text(format_abi(contract.abi))
    logger.info("Wrote %s ABI to %s", contract_name, abi_path)
    return abi_path


def update_contract_addresses(
    manager, registry_path: Path, contract_name: str = CONTRACT_NAME
) -> Registry:
    """
    Record the deployed contract's address for the active chain.

    Args:
        manager: Deployment platform
        registry_path: Path to networkMapping.json
        contract_name: Contract to record

    Returns:
        The registry as written

    Raises:
        RegistryError: If the existing registry is malformed
    """
    contract = manager.get_contract(contract_name)
    chain_id = str(manager.chain_id)

    registry = load_contract_addresses(registry_path)
    if add_contract_address(registry, chain_id, contract_name, contract.address):
        logger.info("Added %s on chain %s to %s", contract.address, chain_id, registry_path)
    else:
        logger.info("%s on chain %s already recorded", contract.address, chain_id)

    save_contract_addresses(registry, registry_path)
    return registry


def update_front_end(
    config: ScriptConfig,
    manager,
    front_end_dir: Optional[Path] = None,
) -> bool:
    """
    Export ABI and address for the front-end when UPDATE_FRONT_END is set.

    Args:
        config: Script configuration
        manager: Deployment platform for config.network
        front_end_dir: Front-end constants directory
                       (defaults to config.front_end_dir, then ../no-patrick-code/constants)

    Returns:
        True if the front-end files were written, False if the update is disabled
    """
    if not config.update_front_end:
        logger.info("UPDATE_FRONT_END not set, skipping front end update")
        return False

    if front_end_dir is None:
        front_end_dir = config.front_end_dir
    registry_path, abi_path = get_front_end_paths(front_end_dir)

    logger.info("Updating front end...")
    update_abi(manager, abi_path)
    # Not atomic with the ABI write above
    update_contract_addresses(manager, registry_path)
    return True
