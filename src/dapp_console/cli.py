"""Command-line entry point for dapp-console."""

import argparse
import os
import sys
from typing import List, NoReturn, Optional

from .constants import (
    ABI_EXTENSION,
    DEFAULT_CONTRACTS_DIR,
    DEFAULT_HOST,
    DEFAULT_PORT,
    DEPLOYED_EXTENSION,
    ENV_CONTRACTS_DIR,
    ENV_HOST,
    ENV_PORT,
    ENV_TLS,
    TRUTHY_VALUES,
)
from .exceptions import FatalStartupError, InputFileError
from .executor import run_script
from .logging_config import setup_logging
from .paths import resolve_contracts_dir
from .registry import build_registry_from_listing
from .repl import start_repl
from .scanner import list_artifacts
from .transport import Transport
from .types import Registry

DESCRIPTION = """\
Command-line REPL Python console.
'web3' provides access to an Ethereum blockchain.
Compiled contracts are represented as objects.
Each deployed contract (with available 'dapp-deploy' metadata)
is associated with its on-chain address.
"""

EXAMPLES = """\
examples:
  dapp-console
      connect to: "http://localhost:8545"
  dapp-console -h "mainnet.infura.io" -p 443 --ssl
      connect to: "https://mainnet.infura.io:443"
  dapp-console -d "/path/to/compiled/contracts"
      load contracts into REPL console
  dapp-console -i "/path/to/script.py"
      execute a script file
  dapp-console -e 'print("accounts:", web3.eth.accounts)'
      execute an inline script

license: GPLv2
"""


def _env_flag(name: str) -> bool:
    return os.environ.get(name, "").strip().lower() in TRUTHY_VALUES


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dapp-console",
        description=DESCRIPTION,
        epilog=EXAMPLES,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        add_help=False,
    )
    parser.add_argument(
        "-h",
        "--host",
        default=os.environ.get(ENV_HOST, DEFAULT_HOST),
        help="Ethereum JSON-RPC server hostname (default: %(default)s)",
    )
    parser.add_argument(
        "-p",
        "--port",
        type=int,
        default=os.environ.get(ENV_PORT, str(DEFAULT_PORT)),
        help="Ethereum JSON-RPC server port number (default: %(default)s)",
    )
    parser.add_argument(
        "--tls",
        "--https",
        "--ssl",
        dest="tls",
        action="store_true",
        default=_env_flag(ENV_TLS),
        help="Require TLS handshake (https:) to connect to Ethereum JSON-RPC server",
    )
    parser.add_argument(
        "-d",
        "--contracts-directory",
        "--contracts_directory",
        dest="contracts_directory",
        default=os.environ.get(ENV_CONTRACTS_DIR, DEFAULT_CONTRACTS_DIR),
        help=(
            "Path to directory containing all contract artifacts: (.abi, .deployed). "
            "The default path assumes that the current directory is the root "
            'of a compiled "dapp" project. (default: %(default)s)'
        ),
    )
    parser.add_argument(
        "-i",
        "--input-file",
        "--input_file",
        dest="input_file",
        help="Path to Python file to execute, then quit.",
    )
    parser.add_argument(
        "-e",
        "--execute",
        help="Inline Python to execute, then quit.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug messages to stderr.",
    )
    parser.add_argument("--help", action="help", help="Show this help message and exit.")
    return parser


def die(msg: str) -> NoReturn:
    print(msg)
    print("\n")
    sys.exit(1)


def read_script(path: str) -> str:
    """
    Read a script passed with --input-file.

    Raises:
        InputFileError: If the file cannot be read
    """
    try:
        with open(path, encoding="utf-8") as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise InputFileError(f"Unable to read input file {path}: {e}") from e


def select_mode(args: argparse.Namespace, registry: Registry, transport: Transport) -> NoReturn:
    """
    Run inline code, a script file, or the REPL, in that order of preference.

    Every mode ends the process.
    """
    if args.execute:
        run_script(args.execute, registry, transport)

    if args.input_file:
        try:
            source = read_script(args.input_file)
        except InputFileError as e:
            die(str(e))
        run_script(source, registry, transport, script_path=args.input_file)

    start_repl(registry, transport)
    sys.exit(0)


def main(argv: Optional[List[str]] = None) -> NoReturn:
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)

    directory = resolve_contracts_dir(args.contracts_directory)

    try:
        abi_filenames = list_artifacts(directory, ABI_EXTENSION)
        deployed_filenames = list_artifacts(directory, DEPLOYED_EXTENSION)
        transport = Transport.connect(args.host, args.port, tls=args.tls)
    except FatalStartupError as e:
        die(str(e))

    registry = build_registry_from_listing(
        directory, abi_filenames, deployed_filenames, transport
    )

    select_mode(args, registry, transport)


if __name__ == "__main__":
    main()
