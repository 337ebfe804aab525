"""Deployment platform for abstract-impulse-nft scripts.

Deploys compiled Hardhat artifacts with web3.py and keeps hardhat-deploy
compatible records under deployments/<network>/, so the Hardhat tooling and
these scripts can resolve the same contract instances.
"""

import logging
import time
from pathlib import Path
from typing import Any, List, Optional, Union

from eth_account import Account
from web3 import Web3

from .exceptions import ConfigurationError, ContractNotFoundError, TransactionFailedError
from .parsers import parse_compiled_artifact, parse_hardhat_deployment, write_hardhat_deployment
from .paths import get_artifact_path, get_deployments_dir
from .types import DeploymentRecord, ScriptConfig

logger = logging.getLogger(__name__)

CONFIRMATION_POLL_INTERVAL = 2.0


class DeploymentManager:
    """Deploys contracts and resolves deployed instances for one network."""

    def __init__(
        self,
        config: ScriptConfig,
        w3: Optional[Web3] = None,
        project_root: Optional[Union[Path, str]] = None,
    ):
        """
        Initialize the deployment manager.

        Args:
            config: Script configuration for the target network
            w3: Web3 instance (defaults to an HTTP provider on config.rpc_url)
            project_root: Hardhat project root holding artifacts/ and deployments/
                          (defaults to current directory)
        """
        self.config = config
        self.project_root = project_root
        if w3 is None:
            w3 = Web3(Web3.HTTPProvider(config.rpc_url, request_kwargs={"timeout": 30}))
        self.w3 = w3
        self._account = None

    @property
    def chain_id(self) -> int:
        return self.config.chain_id

    @property
    def deployments_dir(self) -> Path:
        return get_deployments_dir(self.config.network, self.project_root)

    @property
    def account(self):
        """
        Local signing account built from PRIVATE_KEY on first use.

        Returns:
            eth_account LocalAccount, or None when no key is configured

        Raises:
            ConfigurationError: If the configured key is not a valid private key
        """
        if self._account is None and self.config.private_key:
            try:
                self._account = Account.from_key(self.config.private_key)
            except ValueError as e:
                raise ConfigurationError(
                    f"Invalid PRIVATE_KEY for network '{self.config.network}': {e}"
                ) from e
        return self._account

    @property
    def deployer(self) -> str:
        """
        Address transactions are sent from.

        The configured private key wins; development networks fall back to the
        node's first unlocked account.

        Raises:
            ConfigurationError: If no signer is available
        """
        if self.account is not None:
            return self.account.address
        if self.config.is_development_network:
            return self.w3.eth.accounts[0]
        raise ConfigurationError(
            f"PRIVATE_KEY required to send transactions on network '{self.config.network}'"
        )

    def has_deployment(self, contract_name: str) -> bool:
        return (self.deployments_dir / f"{contract_name}.json").exists()

    def get_deployment(self, contract_name: str) -> DeploymentRecord:
        """
        Get the deployment record for a contract.

        Args:
            contract_name: Name of contract

        Returns:
            DeploymentRecord

        Raises:
            ContractNotFoundError: If the contract was never deployed on this network
        """
        record_path = self.deployments_dir / f"{contract_name}.json"
        if not record_path.exists():
            raise ContractNotFoundError(
                f"No deployment found for: {contract_name} on network '{self.config.network}'"
            )
        return parse_hardhat_deployment(record_path, self.config.network, self.chain_id)

    def get_contract(self, contract_name: str):
        """
        Get a web3 contract handle for a deployed contract.

        Args:
            contract_name: Name of contract

        Returns:
            web3 Contract bound to the recorded address and ABI
        """
        record = self.get_deployment(contract_name)
        return self.w3.eth.contract(
            address=Web3.to_checksum_address(record.address), abi=record.abi
        )

    def send_transaction(self, call, confirmations: int = 1):
        """
        Send a contract call or constructor and wait for it to be mined.

        Args:
            call: web3 ContractFunction or ContractConstructor
            confirmations: Blocks to wait for after inclusion

        Returns:
            Transaction receipt

        Raises:
            TransactionFailedError: If the transaction reverted
        """
        sender = self.deployer

        if self.account is None:
            tx_hash = call.transact({"from": sender})
        else:
            tx = call.build_transaction(
                {
                    "from": sender,
                    "chainId": self.chain_id,
                    "nonce": self.w3.eth.get_transaction_count(sender),
                }
            )
            signed = self.account.sign_transaction(tx)
            tx_hash = self.w3.eth.send_raw_transaction(signed.raw_transaction)

        logger.debug("Sent transaction %s", Web3.to_hex(tx_hash))
        receipt = self.w3.eth.wait_for_transaction_receipt(tx_hash)

        if receipt["status"] != 1:
            raise TransactionFailedError(
                f"Transaction {Web3.to_hex(tx_hash)} failed in block {receipt['blockNumber']}"
            )

        self.wait_for_confirmations(receipt, confirmations)
        return receipt

    def wait_for_confirmations(
        self,
        receipt,
        confirmations: int,
        poll_interval: float = CONFIRMATION_POLL_INTERVAL,
    ) -> None:
        """
        Block until a mined transaction has the requested confirmations.

        The including block counts as the first confirmation.

        Args:
            receipt: Receipt of the mined transaction
            confirmations: Required confirmation count
            poll_interval: Seconds between block number checks
        """
        target_block = receipt["blockNumber"] + confirmations - 1
        while self.w3.eth.block_number < target_block:
            time.sleep(poll_interval)

    def deploy(
        self,
        contract_name: str,
        args: Optional[List[Any]] = None,
        wait_confirmations: int = 1,
    ) -> DeploymentRecord:
        """
        Deploy a compiled contract and record the deployment.

        Args:
            contract_name: Name of contract (artifact is looked up by name)
            args: Constructor arguments
            wait_confirmations: Blocks to wait for after inclusion

        Returns:
            DeploymentRecord of the new deployment

        Raises:
            ArtifactNotFoundError: If the contract has not been compiled
            TransactionFailedError: If the creation transaction reverted
        """
        if args is None:
            args = []

        artifact = parse_compiled_artifact(get_artifact_path(contract_name, self.project_root))
        factory = self.w3.eth.contract(abi=artifact["abi"], bytecode=artifact["bytecode"])

        num_deployments = 1
        if self.has_deployment(contract_name):
            num_deployments = self.get_deployment(contract_name).num_deployments + 1

        logger.info("deploying \"%s\" from %s", contract_name, self.deployer)
        receipt = self.send_transaction(factory.constructor(*args), wait_confirmations)

        record = DeploymentRecord(
            contract_name=contract_name,
            address=receipt["contractAddress"],
            network=self.config.network,
            chain_id=self.chain_id,
            abi=artifact["abi"],
            transaction_hash=Web3.to_hex(receipt["transactionHash"]),
            block=receipt["blockNumber"],
            gas_used=receipt["gasUsed"],
            constructor_args=list(args),
            bytecode=artifact["bytecode"],
            deployed_bytecode=artifact.get("deployed_bytecode"),
            num_deployments=num_deployments,
        )
        write_hardhat_deployment(record, self.deployments_dir)

        logger.info(
            "deployed \"%s\" (tx: %s) at %s with %s gas",
            contract_name,
            record.transaction_hash,
            record.address,
            record.gas_used,
        )
        return record
