"""Configuration constants for dapp-console."""

# Artifact file extensions, as written by `dapp build` / `dapp-deploy`
ABI_EXTENSION = "abi"
DEPLOYED_EXTENSION = "deployed"

# Address reported for contract proxies without a deployment on the active network
ZERO_ADDRESS = "0x0000000000000000000000000000000000000000"

# Connection and discovery defaults
DEFAULT_HOST = "localhost"
DEFAULT_PORT = 8545
DEFAULT_CONTRACTS_DIR = "./out"

# Environment variables that override the defaults above
ENV_HOST = "DAPP_CONSOLE_HOST"
ENV_PORT = "DAPP_CONSOLE_PORT"
ENV_TLS = "DAPP_CONSOLE_TLS"
ENV_CONTRACTS_DIR = "DAPP_CONSOLE_CONTRACTS_DIR"

# Values of ENV_TLS that enable https
TRUTHY_VALUES = ("1", "true", "yes", "on")

# Filename reported for code passed with --execute
INLINE_FILENAME = "<inline>"

# Name of the function that wraps user code
SCRIPT_FUNCTION_NAME = "__script__"

# Logger handed to user code as the `console` binding
SCRIPT_LOGGER_NAME = "dapp_console.script"
