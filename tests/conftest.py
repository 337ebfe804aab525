"""Shared pytest fixtures for abstract-impulse-nft tests."""

import json
import shutil
from pathlib import Path
from typing import Any, Dict, List, Optional

import pytest
from hexbytes import HexBytes

from abstract_impulse_nft.types import DeploymentRecord, ScriptConfig

DEPLOYED_ADDRESS = "0x5FbDB2315678afecb367f032d93F642f64180aa3"
OWNER_ADDRESS = "0xf39Fd6e51aad88F6F4ce6aB8827279cffFb92266"


class FakeCall:
    """Stands in for a web3 ContractFunction call."""

    def __init__(self, name: str, args: tuple, result: Any = None):
        self.name = name
        self.args = args
        self._result = result

    def call(self):
        return self._result


class FakeFunctions:
    def __init__(self, owner: str):
        self._owner = owner

    def owner(self):
        return FakeCall("owner", (), self._owner)

    def mintNFT(self, token_uri: str):
        return FakeCall("mintNFT", (token_uri,))


class FakeEvent:
    """Returns the receipt's pre-decoded events that carry its name."""

    def __init__(self, name: str):
        self.name = name

    def process_receipt(self, receipt, errors=None):
        return [e for e in receipt["decoded_events"] if e["event"] == self.name]


class FakeEvents:
    def __getattr__(self, name: str):
        return lambda: FakeEvent(name)


class FakeContract:
    def __init__(self, address: str, abi: List[Dict[str, Any]], owner: str = OWNER_ADDRESS):
        self.address = address
        self.abi = abi
        self.functions = FakeFunctions(owner)
        self.events = FakeEvents()


class FakeManager:
    """Deployment platform double that records every call made to it."""

    def __init__(
        self,
        contract: FakeContract,
        chain_id: int = 11155111,
        receipt: Optional[Dict[str, Any]] = None,
    ):
        self.contract = contract
        self.chain_id = chain_id
        self.receipt = receipt
        self.project_root = None
        self.calls: List[tuple] = []

    def get_contract(self, contract_name: str):
        self.calls.append(("get_contract", contract_name))
        return self.contract

    def send_transaction(self, call, confirmations: int = 1):
        self.calls.append(("send_transaction", call.name, call.args))
        return self.receipt

    def deploy(self, contract_name: str, args=None, wait_confirmations: int = 1):
        self.calls.append(("deploy", contract_name, list(args or []), wait_confirmations))
        return DeploymentRecord(
            contract_name=contract_name,
            address=self.contract.address,
            network="sepolia",
            chain_id=self.chain_id,
            abi=self.contract.abi,
            constructor_args=list(args or []),
        )


def make_config(network: str = "sepolia", **overrides) -> ScriptConfig:
    """Build a ScriptConfig with test defaults."""
    values: Dict[str, Any] = {
        "network": network,
        "is_development_network": network in ("hardhat", "localhost"),
        "chain_id": 31337 if network in ("hardhat", "localhost") else 11155111,
        "rpc_url": "http://test-rpc.example.com",
        "block_confirmations": 6,
        "explorer_api_key": None,
        "explorer_api_url": "https://api-sepolia.etherscan.io/api",
        "update_front_end": False,
    }
    values.update(overrides)
    return ScriptConfig(**values)


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def hardhat_project(tmp_path: Path, fixtures_dir: Path) -> Path:
    """Copy the sample Hardhat project (artifacts + deployments) to a temp dir."""
    project_root = tmp_path / "hardhat"
    shutil.copytree(fixtures_dir / "hardhat", project_root)
    return project_root


@pytest.fixture
def artifact_path(hardhat_project: Path) -> Path:
    """Return path to the sample compile artifact."""
    return (
        hardhat_project
        / "artifacts"
        / "contracts"
        / "AbstractImpulseNFT.sol"
        / "AbstractImpulseNFT.json"
    )


@pytest.fixture
def deployment_record_path(hardhat_project: Path) -> Path:
    """Return path to the sample sepolia deployment record."""
    return hardhat_project / "deployments" / "sepolia" / "AbstractImpulseNFT.json"


@pytest.fixture
def contract_abi(artifact_path: Path) -> List[Dict[str, Any]]:
    """Load the AbstractImpulseNFT ABI."""
    with open(artifact_path) as f:
        return json.load(f)["abi"]


@pytest.fixture
def fake_contract(contract_abi: List[Dict[str, Any]]) -> FakeContract:
    return FakeContract(DEPLOYED_ADDRESS, contract_abi)


@pytest.fixture
def mint_receipt() -> Dict[str, Any]:
    """Receipt with a Transfer, NFTMinted and NFTUriSet event."""
    return {
        "status": 1,
        "blockNumber": 3120100,
        "transactionHash": HexBytes("0x" + "ab" * 32),
        "decoded_events": [
            {
                "event": "Transfer",
                "logIndex": 0,
                "args": {"from": "0x" + "00" * 20, "to": "0xDEF", "tokenId": 3},
            },
            {"event": "NFTMinted", "logIndex": 1, "args": {"minter": "0xDEF"}},
            {"event": "NFTUriSet", "logIndex": 2, "args": {"uri": "ipfs://x", "tokenId": 3}},
        ],
    }


@pytest.fixture
def fake_manager(fake_contract: FakeContract, mint_receipt: Dict[str, Any]) -> FakeManager:
    return FakeManager(fake_contract, receipt=mint_receipt)


@pytest.fixture
def front_end_dir(tmp_path: Path) -> Path:
    """Create an empty front-end constants directory."""
    constants_dir = tmp_path / "front-end" / "constants"
    constants_dir.mkdir(parents=True)
    return constants_dir


@pytest.fixture
def sample_registry_path(front_end_dir: Path, fixtures_dir: Path) -> Path:
    """Copy the sample networkMapping.json into the front-end directory."""
    registry_path = front_end_dir / "networkMapping.json"
    shutil.copy(fixtures_dir / "network_mapping.json", registry_path)
    return registry_path
