"""Custom exception classes for dapp-console."""


class ConsoleError(Exception):
    """Base exception for dapp-console errors."""

    pass


class FatalStartupError(ConsoleError):
    """Raised when the console cannot start; the process exits with status 1."""

    pass


class ArtifactDirectoryError(FatalStartupError, OSError):
    """Raised when the contracts directory cannot be listed."""

    pass


class TransportConnectionError(FatalStartupError, ConnectionError):
    """Raised when the JSON-RPC node is unreachable."""

    pass


class InputFileError(FatalStartupError, OSError):
    """Raised when the script passed with --input-file cannot be read."""

    pass


class ArtifactParseError(ConsoleError, ValueError):
    """Raised when a .abi or .deployed file cannot be read or parsed."""

    pass
