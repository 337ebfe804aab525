"""Deploy procedure for AbstractImpulseNFT."""

import logging
from typing import Any, List, Optional

from .constants import CONTRACT_NAME
from .deployments import DeploymentManager
from .exceptions import DeploymentError
from .paths import get_artifact_path
from .types import DeploymentRecord, ScriptConfig, VerificationResult
from .verification import EtherscanVerifier

logger = logging.getLogger(__name__)


def should_verify(config: ScriptConfig) -> bool:
    """Explorer verification runs only off development networks and with an API key."""
    return not config.is_development_network and bool(config.explorer_api_key)


def try_verify(verifier, address: str, constructor_args: List[Any]) -> VerificationResult:
    """
    Run a verification without letting its failure escape.

    Args:
        verifier: Object with verify(address, constructor_args)
        address: Deployed contract address
        constructor_args: Arguments the contract was deployed with

    Returns:
        VerificationResult, with success False when verification failed
    """
    logger.info("Verifying...")
    try:
        result = verifier.verify(address, constructor_args)
    except DeploymentError as e:
        logger.warning("Verification of %s failed: %s", address, e)
        return VerificationResult(address=address, success=False, message=str(e))

    logger.info("Verification of %s: %s", address, result.message)
    return result


def deploy_contract(
    config: ScriptConfig,
    manager: DeploymentManager,
    verifier: Optional[EtherscanVerifier] = None,
) -> DeploymentRecord:
    """
    Deploy AbstractImpulseNFT and verify it when the network allows.

    Args:
        config: Script configuration
        manager: Deployment platform for config.network
        verifier: Explorer verifier (built from config when needed and omitted)

    Returns:
        DeploymentRecord of the new deployment

    Raises:
        DeploymentError: If the deployment itself fails
    """
    logger.info("----------------------------------------------------")
    constructor_args: List[Any] = []
    record = manager.deploy(
        CONTRACT_NAME,
        args=constructor_args,
        wait_confirmations=config.block_confirmations,
    )

    if should_verify(config):
        if verifier is None:
            verifier = EtherscanVerifier(
                api_url=config.explorer_api_url,
                api_key=config.explorer_api_key,
                artifact_path=get_artifact_path(CONTRACT_NAME, manager.project_root),
            )
        try_verify(verifier, record.address, constructor_args)

    return record
