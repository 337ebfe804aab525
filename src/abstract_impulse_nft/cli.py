"""Command-line entry points for abstract-impulse-nft scripts.

Usage:
$ abstract-impulse-nft deploy --network sepolia
$ abstract-impulse-nft mint --network sepolia
$ UPDATE_FRONT_END=true abstract-impulse-nft update-front-end --network sepolia
"""

import argparse
import logging
import sys
from typing import List, Optional

from .config import load_config
from .deploy import deploy_contract
from .deployments import DeploymentManager
from .frontend import update_front_end
from .mint import mint_nft


def _deploy(args: argparse.Namespace) -> int:
    config = load_config(args.network, dotenv_path=args.env_file)
    deploy_contract(config, DeploymentManager(config, project_root=args.project_root))
    return 0


def _mint(args: argparse.Namespace) -> int:
    config = load_config(args.network, dotenv_path=args.env_file)
    mint_nft(config, DeploymentManager(config, project_root=args.project_root))
    return 0


def _update_front_end(args: argparse.Namespace) -> int:
    config = load_config(args.network, dotenv_path=args.env_file)
    update_front_end(
        config,
        DeploymentManager(config, project_root=args.project_root),
        front_end_dir=args.front_end_dir,
    )
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="abstract-impulse-nft",
        description="Deploy, mint and sync the AbstractImpulseNFT contract",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--network", default="hardhat", help="Target network (default: %(default)s)"
    )
    common.add_argument(
        "--project-root",
        default=None,
        help="Hardhat project root with artifacts/ and deployments/ (default: cwd)",
    )
    common.add_argument(
        "--env-file", default=None, help="Optional path to .env file to load"
    )

    deploy_parser = subparsers.add_parser(
        "deploy", parents=[common], help="Deploy AbstractImpulseNFT"
    )
    deploy_parser.set_defaults(func=_deploy)

    mint_parser = subparsers.add_parser(
        "mint", parents=[common], help="Mint an NFT with a prompted token URI"
    )
    mint_parser.set_defaults(func=_mint)

    sync_parser = subparsers.add_parser(
        "update-front-end",
        parents=[common],
        help="Write ABI and address to the front-end (requires UPDATE_FRONT_END)",
    )
    sync_parser.add_argument(
        "--front-end-dir",
        default=None,
        help="Front-end constants directory (default: $FRONT_END_DIR or ../no-patrick-code/constants)",
    )
    sync_parser.set_defaults(func=_update_front_end)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(message)s",
    )

    try:
        return args.func(args)
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
