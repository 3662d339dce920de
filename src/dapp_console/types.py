"""Data types and dataclasses for dapp-console."""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Awaitable, Dict, List, Mapping, Optional, Tuple


@dataclass(frozen=True)
class SkippedArtifact:
    """An artifact file that was left out of the registry."""

    path: str
    kind: str  # "abi" or "deployed"
    reason: str


@dataclass(frozen=True)
class ContractEntry:
    """One loaded interface descriptor and its contract proxy."""

    name: str  # Base name, e.g. "Ballot"
    abi: List[Dict[str, Any]]
    contract: Any  # web3 contract factory (unbound) or instance (bound)
    address: Optional[str] = None  # Resolved address, None when not deployed on the network


@dataclass(frozen=True)
class Registry:
    """Contracts discovered in one contracts directory, keyed by base name."""

    network_id: str
    abis: Mapping[str, List[Dict[str, Any]]] = field(default_factory=dict)
    addresses: Mapping[str, str] = field(default_factory=dict)
    contracts: Mapping[str, Any] = field(default_factory=dict)
    skipped: Tuple[SkippedArtifact, ...] = ()

    def __post_init__(self) -> None:
        # Shared read-only between every execution
        for name in ("abis", "addresses", "contracts"):
            object.__setattr__(self, name, MappingProxyType(dict(getattr(self, name))))

    def names(self) -> List[str]:
        """Contract names in discovery order."""
        return list(self.contracts)

    def is_bound(self, name: str) -> bool:
        contract = self.contracts.get(name)
        return contract is not None and contract.address is not None


@dataclass(frozen=True)
class ScriptLocation:
    """Location metadata of a script run with --input-file."""

    cwd: str  # Working directory at launch
    filename: str  # Absolute, normalized script path
    dirname: str
    basename: str


@dataclass(frozen=True)
class Immediate:
    """Script result that is already a value."""

    value: Any


@dataclass(frozen=True)
class Pending:
    """Script result that settles asynchronously."""

    awaitable: Awaitable[Any]
