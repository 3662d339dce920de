"""
dapp-console: command-line Python console for compiled and deployed Ethereum contracts
"""

from importlib.metadata import PackageNotFoundError, version

from .context import build_context
from .exceptions import (
    ArtifactDirectoryError,
    ArtifactParseError,
    ConsoleError,
    FatalStartupError,
    InputFileError,
    TransportConnectionError,
)
from .executor import execute, run_script, settle
from .registry import build_registry
from .text import to_text
from .transport import Transport
from .types import ContractEntry, Immediate, Pending, Registry, ScriptLocation, SkippedArtifact

try:
    __version__ = version("dapp-console")
except PackageNotFoundError:
    __version__ = None

__all__ = [
    "build_registry",
    "build_context",
    "execute",
    "settle",
    "run_script",
    "to_text",
    "Transport",
    "Registry",
    "ContractEntry",
    "SkippedArtifact",
    "ScriptLocation",
    "Immediate",
    "Pending",
    "ConsoleError",
    "FatalStartupError",
    "ArtifactDirectoryError",
    "TransportConnectionError",
    "InputFileError",
    "ArtifactParseError",
]
