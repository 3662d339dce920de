"""Contract registry construction for dapp-console."""

import logging
import os
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Tuple, Union

from .constants import ABI_EXTENSION, DEPLOYED_EXTENSION
from .exceptions import ArtifactParseError
from .parsers import (
    contract_name,
    parse_deployment_record,
    parse_interface_descriptor,
    resolve_address,
)
from .scanner import list_artifacts
from .transport import Transport
from .types import ContractEntry, Registry, SkippedArtifact

logger = logging.getLogger(__name__)


def _skip(path: Path, kind: str, reason: Any) -> SkippedArtifact:
    logger.warning("Skipping %s: %s", path, reason)
    return SkippedArtifact(path=str(path), kind=kind, reason=str(reason))


def load_contract(
    directory: Path,
    abi_filename: str,
    deployed_filenames: Sequence[str],
    transport: Transport,
) -> Tuple[Optional[ContractEntry], List[SkippedArtifact]]:
    """
    Load one interface descriptor and bind it to its deployed address.

    Args:
        directory: Contracts directory
        abi_filename: Descriptor filename, e.g. "Ballot.abi"
        deployed_filenames: Deployment record filenames present in directory
        transport: Connected transport

    Returns:
        Tuple of (entry, skipped) where:
        - entry: ContractEntry, or None if the descriptor could not be parsed
        - skipped: Artifacts that were left out, for inspection by the caller
    """
    name = contract_name(abi_filename, ABI_EXTENSION)
    abi_path = directory / abi_filename

    try:
        abi = parse_interface_descriptor(abi_path)
    except ArtifactParseError as e:
        return None, [_skip(abi_path, ABI_EXTENSION, e)]

    # web3 raises assorted errors (KeyError included) on odd entries
    try:
        contract = transport.contract(abi)
    except Exception as e:
        return None, [_skip(abi_path, ABI_EXTENSION, f"Rejected by web3: {e!r}")]

    deployed_filename = f"{name}.{DEPLOYED_EXTENSION}"
    if deployed_filename not in deployed_filenames:
        logger.debug("%s has no deployment record", name)
        return ContractEntry(name=name, abi=abi, contract=contract), []

    deployed_path = directory / deployed_filename
    try:
        record = parse_deployment_record(deployed_path)
    except ArtifactParseError as e:
        return ContractEntry(name=name, abi=abi, contract=contract), [
            _skip(deployed_path, DEPLOYED_EXTENSION, e)
        ]

    address = resolve_address(record, transport.network_id)
    if address is None:
        logger.debug("%s is not deployed on network %s", name, transport.network_id)
        return ContractEntry(name=name, abi=abi, contract=contract), []

    # The address is recorded as found; only the binding is skipped
    try:
        contract = transport.contract(abi, address)
    except (ValueError, TypeError) as e:
        return ContractEntry(name=name, abi=abi, contract=contract, address=address), [
            _skip(deployed_path, DEPLOYED_EXTENSION, f"Invalid address {address!r}: {e}")
        ]

    logger.debug("%s bound to %s", name, address)
    return ContractEntry(name=name, abi=abi, contract=contract, address=address), []


def build_registry(directory: Union[Path, str], transport: Transport) -> Registry:
    """
    Discover the contracts in a directory and build a proxy for each one.

    Every <name>.abi file that parses becomes a contract proxy. If a
    <name>.deployed file lists addresses for the active network, the proxy is
    bound to the last of them. Malformed files never abort the build; they
    are reported in Registry.skipped.

    Args:
        directory: Contracts directory
        transport: Connected transport

    Returns:
        Registry of descriptors, resolved addresses and proxies

    Raises:
        ArtifactDirectoryError: If the directory cannot be listed
    """
    directory = Path(directory)
    abi_filenames = list_artifacts(directory, ABI_EXTENSION)
    deployed_filenames = list_artifacts(directory, DEPLOYED_EXTENSION)

    return build_registry_from_listing(
        directory, abi_filenames, deployed_filenames, transport
    )


def build_registry_from_listing(
    directory: Union[Path, str],
    abi_filenames: Sequence[str],
    deployed_filenames: Sequence[str],
    transport: Transport,
) -> Registry:
    """
    Build a registry from filenames that were already listed.

    Args:
        directory: Contracts directory
        abi_filenames: Descriptor filenames, in the order to load them
        deployed_filenames: Deployment record filenames
        transport: Connected transport

    Returns:
        Registry of descriptors, resolved addresses and proxies
    """
    directory = Path(directory)
    abis: Dict[str, List[Dict[str, Any]]] = {}
    addresses: Dict[str, str] = {}
    contracts: Dict[str, Any] = {}
    skipped: List[SkippedArtifact] = []

    for abi_filename in abi_filenames:
        entry, entry_skipped = load_contract(
            directory, abi_filename, deployed_filenames, transport
        )
        skipped.extend(entry_skipped)

        if entry is None:
            continue

        abis[entry.name] = entry.abi
        contracts[entry.name] = entry.contract
        if entry.address is not None:
            addresses[entry.name] = entry.address

    logger.info(
        "Loaded %d contracts from %s (%d bound on network %s)",
        len(contracts),
        os.fspath(directory),
        len(addresses),
        transport.network_id,
    )

    return Registry(
        network_id=transport.network_id,
        abis=abis,
        addresses=addresses,
        contracts=contracts,
        skipped=tuple(skipped),
    )
