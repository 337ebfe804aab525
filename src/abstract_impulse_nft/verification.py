"""Etherscan source verification for abstract-impulse-nft scripts."""

import json
from pathlib import Path
from typing import Any, Dict, List, Optional

import requests
from eth_abi import encode

from .exceptions import DeploymentError, VerificationError
from .parsers import load_build_info, parse_compiled_artifact
from .types import VerificationResult


def encode_constructor_args(abi: List[Dict[str, Any]], args: List[Any]) -> str:
    """
    ABI-encode constructor arguments as Etherscan expects them.

    Args:
        abi: Contract ABI
        args: Constructor arguments

    Returns:
        Hex string without 0x prefix (empty for no arguments)
    """
    if not args:
        return ""

    constructor = next((item for item in abi if item.get("type") == "constructor"), None)
    if constructor is None:
        raise VerificationError("Constructor arguments given but ABI has no constructor")

    types = [item["type"] for item in constructor.get("inputs", [])]
    return encode(types, args).hex()


class EtherscanVerifier:
    """Submits verified source for a deployed contract to an Etherscan-style API."""

    def __init__(
        self,
        api_url: str,
        api_key: str,
        artifact_path: Path,
        timeout: int = 30,
    ):
        """
        Args:
            api_url: Explorer API endpoint, e.g. https://api-sepolia.etherscan.io/api
            api_key: Explorer API key
            artifact_path: Compile artifact of the contract being verified
            timeout: HTTP timeout in seconds
        """
        self.api_url = api_url
        self.api_key = api_key
        self.artifact_path = artifact_path
        self.timeout = timeout

    def build_request(self, address: str, constructor_args: List[Any]) -> Dict[str, str]:
        """
        Build the verifysourcecode form payload.

        Args:
            address: Deployed contract address
            constructor_args: Arguments the contract was deployed with

        Returns:
            Form fields for the POST request
        """
        artifact = parse_compiled_artifact(self.artifact_path)
        build_info = load_build_info(self.artifact_path)

        source_name = artifact.get("source_name", f"contracts/{artifact['contract_name']}.sol")

        return {
            "apikey": self.api_key,
            "module": "contract",
            "action": "verifysourcecode",
            "contractaddress": address,
            "sourceCode": json.dumps(build_info["input"]),
            "codeformat": "solidity-standard-json-input",
            "contractname": f"{source_name}:{artifact['contract_name']}",
            "compilerversion": f"v{build_info['solcLongVersion']}",
            # Etherscan's parameter name is misspelled
            "constructorArguements": encode_constructor_args(artifact["abi"], constructor_args),
        }

    def verify(self, address: str, constructor_args: Optional[List[Any]] = None) -> VerificationResult:
        """
        Submit a verification request.

        Args:
            address: Deployed contract address
            constructor_args: Arguments the contract was deployed with

        Returns:
            VerificationResult; an already verified contract counts as success

        Raises:
            VerificationError: If the explorer rejects the request or is unreachable
        """
        if constructor_args is None:
            constructor_args = []

        try:
            payload = self.build_request(address, constructor_args)
        except DeploymentError:
            raise
        except KeyError as e:
            raise VerificationError(f"Build info missing field {e}") from e
        except (ValueError, OSError) as e:
            raise VerificationError(f"Unreadable compiler output: {e}") from e

        try:
            response = requests.post(self.api_url, data=payload, timeout=self.timeout)
        except requests.RequestException as e:
            raise VerificationError(f"Network error during verification: {e}") from e

        # Check for HTTP errors
        if response.status_code != 200:
            raise VerificationError(
                f"Verification request failed with status {response.status_code}"
            )

        try:
            result = response.json()
        except ValueError as e:
            raise VerificationError(f"Unexpected verification response: {response.text}") from e

        if not isinstance(result, dict):
            raise VerificationError(f"Unexpected verification response: {response.text}")

        message = str(result.get("result", ""))
        if result.get("status") == "1":
            return VerificationResult(address=address, success=True, message="Submitted", guid=message)

        if "already verified" in message.lower():
            return VerificationResult(address=address, success=True, message="Already Verified")

        raise VerificationError(f"Verification rejected: {message}")
