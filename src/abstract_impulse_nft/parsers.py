"""Hardhat artifact and hardhat-deploy record parsers for abstract-impulse-nft scripts."""

import json
from pathlib import Path
from typing import Any, Dict, Optional

from .exceptions import ArtifactNotFoundError, DefectiveDeploymentError
from .types import DeploymentRecord


def parse_compiled_artifact(file_path: Path) -> Dict[str, Any]:
    """
    Parse a Hardhat compile artifact.

    Args:
        file_path: Path to artifacts/contracts/<Name>.sol/<Name>.json

    Returns:
        Dictionary with canonical field names:
        - Required: contract_name, abi, bytecode
        - Optional: source_name, deployed_bytecode

    Raises:
        ArtifactNotFoundError: If the artifact file does not exist
        DefectiveDeploymentError: If the artifact has no ABI or bytecode
    """
    if not file_path.exists():
        raise ArtifactNotFoundError(
            f"Compiled artifact not found at {file_path}. Run `npx hardhat compile` first."
        )

    with open(file_path) as f:
        data = json.load(f)

    abi = data.get("abi")
    bytecode = data.get("bytecode")
    if abi is None or not bytecode or bytecode == "0x":
        raise DefectiveDeploymentError(f"Artifact missing abi/bytecode: {file_path}")

    result: Dict[str, Any] = {
        "contract_name": data.get("contractName", file_path.stem),
        "abi": abi,
        "bytecode": bytecode,
    }

    if "sourceName" in data:
        result["source_name"] = data["sourceName"]
    if "deployedBytecode" in data:
        result["deployed_bytecode"] = data["deployedBytecode"]

    return result


def load_build_info(artifact_path: Path) -> Dict[str, Any]:
    """
    Load the build-info referenced by an artifact's .dbg.json sibling.

    Args:
        artifact_path: Path to the compile artifact

    Returns:
        Build-info dictionary (solcLongVersion, input, ...)

    Raises:
        ArtifactNotFoundError: If the debug file or build-info is missing
    """
    dbg_path = artifact_path.with_name(f"{artifact_path.stem}.dbg.json")
    if not dbg_path.exists():
        raise ArtifactNotFoundError(f"Debug artifact not found at {dbg_path}")

    with open(dbg_path) as f:
        dbg = json.load(f)

    # buildInfo is relative to the .dbg.json location
    build_info_path = (dbg_path.parent / dbg["buildInfo"]).resolve()
    if not build_info_path.exists():
        raise ArtifactNotFoundError(f"Build info not found at {build_info_path}")

    with open(build_info_path) as f:
        return json.load(f)


def parse_hardhat_deployment(
    file_path: Path, network: str, chain_id: Optional[int] = None
) -> DeploymentRecord:
    """
    Parse a hardhat-deploy JSON file.

    Args:
        file_path: Path to deployments/<network>/<Name>.json
        network: Network the record belongs to
        chain_id: Chain id (read from the sibling .chainId file when omitted)

    Returns:
        DeploymentRecord for the contract

    Raises:
        DefectiveDeploymentError: If address or abi is missing
    """
    with open(file_path) as f:
        data = json.load(f)

    if not data.get("address") or "abi" not in data:
        raise DefectiveDeploymentError(
            f"Missing address or abi in hardhat deployment file: {file_path}"
        )

    if chain_id is None:
        chain_id_file = file_path.parent / ".chainId"
        chain_id = int(chain_id_file.read_text().strip()) if chain_id_file.exists() else 0

    # Try to get block number from receipt first, fall back to top-level
    receipt = data.get("receipt", {})
    block_number = receipt.get("blockNumber", data.get("blockNumber"))

    return DeploymentRecord(
        contract_name=file_path.stem,
        address=data["address"],
        network=network,
        chain_id=chain_id,
        abi=data["abi"],
        transaction_hash=data.get("transactionHash"),
        block=block_number,
        gas_used=receipt.get("gasUsed"),
        constructor_args=data.get("args", []),
        bytecode=data.get("bytecode"),
        deployed_bytecode=data.get("deployedBytecode"),
        num_deployments=data.get("numDeployments", 1),
    )


def write_hardhat_deployment(record: DeploymentRecord, deployments_dir: Path) -> Path:
    """
    Write a deployment record in hardhat-deploy layout.

    Args:
        record: Deployment to persist
        deployments_dir: deployments/<network> directory

    Returns:
        Path of the written <Name>.json file

    Creates the directory and its .chainId file if they don't exist.
    """
    deployments_dir.mkdir(parents=True, exist_ok=True)

    chain_id_file = deployments_dir / ".chainId"
    if not chain_id_file.exists():
        chain_id_file.write_text(str(record.chain_id))

    data: Dict[str, Any] = {
        "address": record.address,
        "abi": record.abi,
        "transactionHash": record.transaction_hash,
        "receipt": {
            "contractAddress": record.address,
            "transactionHash": record.transaction_hash,
            "blockNumber": record.block,
            "gasUsed": record.gas_used,
        },
        "args": record.constructor_args,
        "numDeployments": record.num_deployments,
    }

    # Add optional fields
    if record.bytecode is not None:
        data["bytecode"] = record.bytecode
    if record.deployed_bytecode is not None:
        data["deployedBytecode"] = record.deployed_bytecode

    output_path = deployments_dir / f"{record.contract_name}.json"
    with open(output_path, "w") as f:
        json.dump(data, f, indent=2)

    return output_path
