"""Unit tests for mint receipt event lookup."""

import pytest
from eth_abi import encode
from hexbytes import HexBytes
from web3 import Web3

from abstract_impulse_nft.exceptions import EventNotFoundError
from abstract_impulse_nft.mint import (
    decode_receipt_events,
    extract_mint_result,
    find_event,
    format_mint_summary,
)
from abstract_impulse_nft.types import MintResult

from conftest import DEPLOYED_ADDRESS, OWNER_ADDRESS

TX_HASH = HexBytes("0x" + "ab" * 32)
BLOCK_HASH = HexBytes("0x" + "cd" * 32)


def _address_topic(address: str) -> HexBytes:
    return HexBytes(b"\x00" * 12 + HexBytes(address))


def _uint_topic(value: int) -> HexBytes:
    return HexBytes(value.to_bytes(32, "big"))


def _log(log_index: int, topics, data: bytes = b"") -> dict:
    return {
        "address": DEPLOYED_ADDRESS,
        "topics": topics,
        "data": HexBytes(data),
        "logIndex": log_index,
        "transactionIndex": 0,
        "transactionHash": TX_HASH,
        "blockHash": BLOCK_HASH,
        "blockNumber": 3120100,
    }


@pytest.fixture
def web3_contract(contract_abi):
    w3 = Web3(Web3.HTTPProvider("http://127.0.0.1:8545"))
    return w3.eth.contract(address=DEPLOYED_ADDRESS, abi=contract_abi)


@pytest.fixture
def encoded_mint_receipt() -> dict:
    """Receipt as a node returns it after mintNFT("ipfs://x") minted token 3."""
    return {
        "status": 1,
        "transactionHash": TX_HASH,
        "blockNumber": 3120100,
        "logs": [
            _log(
                0,
                [
                    Web3.keccak(text="Transfer(address,address,uint256)"),
                    _address_topic("0x" + "00" * 20),
                    _address_topic(OWNER_ADDRESS),
                    _uint_topic(3),
                ],
            ),
            _log(
                1,
                [Web3.keccak(text="NFTMinted(address)"), _address_topic(OWNER_ADDRESS)],
            ),
            _log(
                2,
                [Web3.keccak(text="NFTUriSet(string,uint256)"), _uint_topic(3)],
                encode(["string"], ["ipfs://x"]),
            ),
        ],
    }


class TestFindEvent:
    """Test the find_event function."""

    def test_finds_event_by_name(self, mint_receipt):
        event = find_event(mint_receipt["decoded_events"], "NFTMinted")
        assert event["args"]["minter"] == "0xDEF"

    def test_returns_first_match(self):
        events = [
            {"event": "NFTMinted", "args": {"minter": "0x1"}},
            {"event": "NFTMinted", "args": {"minter": "0x2"}},
        ]
        assert find_event(events, "NFTMinted")["args"]["minter"] == "0x1"

    def test_missing_event_raises_error(self, mint_receipt):
        with pytest.raises(EventNotFoundError) as exc_info:
            find_event(mint_receipt["decoded_events"], "Approval")

        assert "Approval" in str(exc_info.value)


class TestExtractMintResult:
    """Test the extract_mint_result function."""

    def test_extracts_minter_uri_and_token_id(self, mint_receipt):
        result = extract_mint_result(mint_receipt["decoded_events"])
        assert result == MintResult(minter="0xDEF", token_uri="ipfs://x", token_id=3)

    def test_independent_of_event_order(self, mint_receipt):
        reordered = list(reversed(mint_receipt["decoded_events"]))
        assert extract_mint_result(reordered).token_id == 3

    def test_missing_uri_event_raises_error(self, mint_receipt):
        events = [e for e in mint_receipt["decoded_events"] if e["event"] != "NFTUriSet"]

        with pytest.raises(EventNotFoundError):
            extract_mint_result(events)


class TestFormatMintSummary:
    def test_summary_lines(self):
        lines = format_mint_summary(MintResult("0xDEF", "ipfs://x", 3))

        assert lines == [
            "NFT Minted!",
            "Minter: 0xDEF",
            "TokenURI: ipfs://x TokenId: 3",
        ]


class TestDecodeReceiptEvents:
    """Decode raw receipt logs with a web3 contract."""

    def test_decodes_all_contract_events_in_log_order(self, web3_contract, encoded_mint_receipt):
        events = decode_receipt_events(web3_contract, encoded_mint_receipt)

        assert [e["event"] for e in events] == ["Transfer", "NFTMinted", "NFTUriSet"]

    def test_decoded_events_feed_mint_result(self, web3_contract, encoded_mint_receipt):
        result = extract_mint_result(decode_receipt_events(web3_contract, encoded_mint_receipt))

        assert result.minter == OWNER_ADDRESS
        assert result.token_uri == "ipfs://x"
        assert result.token_id == 3

    def test_foreign_logs_are_skipped(self, web3_contract, encoded_mint_receipt):
        encoded_mint_receipt["logs"].append(
            _log(3, [Web3.keccak(text="Unrelated(uint256)"), _uint_topic(1)])
        )

        events = decode_receipt_events(web3_contract, encoded_mint_receipt)

        assert len(events) == 3
