"""Mint procedure for AbstractImpulseNFT."""

import logging
from typing import Any, Callable, Iterable, List, Mapping, Optional

from web3.logs import DISCARD

from .constants import CONTRACT_NAME, MINTER_EVENT, URI_EVENT
from .exceptions import EventNotFoundError
from .types import MintResult, ScriptConfig

logger = logging.getLogger(__name__)

DEVELOPMENT_NETWORK_MESSAGE = "This script is allowed only for Goerli, Sepolia or Mainnet"
TOKEN_URI_PROMPT = "TokenURI of new NFT: "


def decode_receipt_events(contract, receipt) -> List[Mapping[str, Any]]:
    """
    Decode every log in a receipt that matches an event of the contract ABI.

    Args:
        contract: web3 Contract that emitted the logs
        receipt: Transaction receipt

    Returns:
        Decoded events ordered by log index
    """
    events: List[Mapping[str, Any]] = []
    event_names = {item["name"] for item in contract.abi if item.get("type") == "event"}
    for name in sorted(event_names):
        event = getattr(contract.events, name)
        events.extend(event().process_receipt(receipt, errors=DISCARD))

    events.sort(key=lambda e: e["logIndex"])
    return events


def find_event(events: Iterable[Mapping[str, Any]], name: str) -> Mapping[str, Any]:
    """
    Find the first decoded event with the given name.

    Raises:
        EventNotFoundError: If no event has that name
    """
    for event in events:
        if event["event"] == name:
            return event
    raise EventNotFoundError(f"Event '{name}' not found in transaction receipt")


def extract_mint_result(events: Iterable[Mapping[str, Any]]) -> MintResult:
    """
    Read minter, token URI and token id from decoded mint events.

    Args:
        events: Decoded receipt events

    Returns:
        MintResult

    Raises:
        EventNotFoundError: If the minter or URI event is missing
    """
    events = list(events)
    minted = find_event(events, MINTER_EVENT)
    uri_set = find_event(events, URI_EVENT)

    return MintResult(
        minter=minted["args"]["minter"],
        token_uri=uri_set["args"]["uri"],
        token_id=int(uri_set["args"]["tokenId"]),
    )


def format_mint_summary(result: MintResult) -> List[str]:
    return [
        "NFT Minted!",
        f"Minter: {result.minter}",
        f"TokenURI: {result.token_uri} TokenId: {result.token_id}",
    ]


def mint_nft(
    config: ScriptConfig,
    manager,
    prompt: Callable[[str], str] = input,
    out: Callable[[str], None] = print,
) -> Optional[MintResult]:
    """
    Mint a new NFT with an operator-supplied token URI.

    Refuses to run on development networks: prints an explanation and returns
    None without touching the chain.

    Args:
        config: Script configuration
        manager: Deployment platform for config.network
        prompt: Blocking line reader for the token URI
        out: Sink for operator-facing output

    Returns:
        MintResult, or None when skipped

    Raises:
        ContractNotFoundError: If AbstractImpulseNFT is not deployed on the network
        TransactionFailedError: If the mint transaction reverted
        EventNotFoundError: If the receipt lacks the mint events
    """
    if config.is_development_network:
        out(DEVELOPMENT_NETWORK_MESSAGE)
        return None

    contract = manager.get_contract(CONTRACT_NAME)
    token_uri = prompt(TOKEN_URI_PROMPT)

    out(
        f"Working With {CONTRACT_NAME} Contract: {contract.address} "
        f"Owner: {contract.functions.owner().call()}"
    )

    receipt = manager.send_transaction(contract.functions.mintNFT(token_uri))
    logger.debug("Mint included in block %s", receipt["blockNumber"])

    result = extract_mint_result(decode_receipt_events(contract, receipt))
    for line in format_mint_summary(result):
        out(line)

    return result
