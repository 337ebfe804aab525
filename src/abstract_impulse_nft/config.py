"""Environment-driven configuration for abstract-impulse-nft scripts."""

import os
from typing import Mapping, Optional

from dotenv import find_dotenv, load_dotenv

from .constants import (
    DEFAULT_BLOCK_CONFIRMATIONS,
    DEVELOPMENT_CHAINS,
    FALSY_FLAG_VALUES,
    NETWORK_CONFIG,
)
from .exceptions import ConfigurationError, NetworkNotFoundError
from .types import ScriptConfig


def parse_flag(value: Optional[str]) -> bool:
    """
    Interpret a boolean-like environment value.

    Args:
        value: Raw environment value (None when unset)

    Returns:
        False for unset, empty, "0", "false", "no" or "off" (case-insensitive),
        True otherwise
    """
    if value is None:
        return False
    return value.strip().lower() not in FALSY_FLAG_VALUES


def load_config(
    network: str,
    env: Optional[Mapping[str, str]] = None,
    dotenv_path: Optional[str] = None,
) -> ScriptConfig:
    """
    Build the script configuration for a network.

    Reads .env (via python-dotenv) into the process environment unless an
    explicit env mapping is given.

    Args:
        network: Network name from NETWORK_CONFIG
        env: Environment mapping (defaults to os.environ after loading .env)
        dotenv_path: Optional .env file location

    Returns:
        ScriptConfig for the network

    Raises:
        NetworkNotFoundError: If network is unknown
        ConfigurationError: If no RPC URL is available for the network
    """
    if network not in NETWORK_CONFIG:
        raise NetworkNotFoundError(
            f"Network '{network}' not found; expected one of {sorted(NETWORK_CONFIG)}"
        )

    if env is None:
        load_dotenv(dotenv_path or find_dotenv(usecwd=True))
        env = os.environ

    network_config = NETWORK_CONFIG[network]

    rpc_url = env.get(network_config["default_rpc_env"]) or network_config.get(
        "default_rpc_url"
    )
    if not rpc_url:
        raise ConfigurationError(
            f"RPC URL required for network '{network}': "
            f"set ${network_config['default_rpc_env']}"
        )

    return ScriptConfig(
        network=network,
        is_development_network=network in DEVELOPMENT_CHAINS,
        chain_id=network_config["chain_id"],
        rpc_url=rpc_url,
        block_confirmations=network_config.get(
            "block_confirmations", DEFAULT_BLOCK_CONFIRMATIONS
        ),
        explorer_api_key=env.get("ETHERSCAN_API_KEY") or None,
        explorer_api_url=network_config.get("explorer_api_url"),
        update_front_end=parse_flag(env.get("UPDATE_FRONT_END")),
        front_end_dir=env.get("FRONT_END_DIR") or None,
        private_key=env.get("PRIVATE_KEY") or None,
    )
