"""Configuration constants for abstract-impulse-nft scripts."""

CONTRACT_NAME = "AbstractImpulseNFT"

# Event names emitted by AbstractImpulseNFT.mintNFT
MINTER_EVENT = "NFTMinted"  # args: minter
URI_EVENT = "NFTUriSet"  # args: uri, tokenId

# Networks that reset quickly; no explorer verification, no interactive minting
DEVELOPMENT_CHAINS = ("hardhat", "localhost")

# Network configuration, mirrors the networks table of hardhat.config.js
NETWORK_CONFIG = {
    "hardhat": {
        "chain_id": 31337,
        "chain_name": "Hardhat Network",
        "default_rpc_url": "http://127.0.0.1:8545",
        "default_rpc_env": "HARDHAT_RPC_URL",
        "block_confirmations": 1,
    },
    "localhost": {
        "chain_id": 31337,
        "chain_name": "Localhost",
        "default_rpc_url": "http://127.0.0.1:8545",
        "default_rpc_env": "LOCALHOST_RPC_URL",
        "block_confirmations": 1,
    },
    "goerli": {
        "chain_id": 5,
        "chain_name": "Goerli",
        "default_rpc_env": "GOERLI_RPC_URL",
        "block_confirmations": 6,
        "block_explorer_url": "https://goerli.etherscan.io",
        "explorer_api_url": "https://api-goerli.etherscan.io/api",
    },
    "sepolia": {
        "chain_id": 11155111,
        "chain_name": "Sepolia",
        "default_rpc_env": "SEPOLIA_RPC_URL",
        "block_confirmations": 6,
        "block_explorer_url": "https://sepolia.etherscan.io",
        "explorer_api_url": "https://api-sepolia.etherscan.io/api",
    },
    "mainnet": {
        "chain_id": 1,
        "chain_name": "Ethereum Mainnet",
        "default_rpc_env": "MAINNET_RPC_URL",
        "block_confirmations": 6,
        "block_explorer_url": "https://etherscan.io",
        "explorer_api_url": "https://api.etherscan.io/api",
    },
}

DEFAULT_BLOCK_CONFIRMATIONS = 1

# Values of boolean-like environment flags that count as "off"
FALSY_FLAG_VALUES = ("", "0", "false", "no", "off")
