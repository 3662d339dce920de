"""Artifact file parsers for dapp-console."""

import json
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from .exceptions import ArtifactParseError
from .scanner import normalize_extension


def contract_name(filename: str, extension: str) -> str:
    """
    Derive the contract base name from an artifact filename.

    Args:
        filename: Artifact filename, e.g. "Ballot.abi"
        extension: Extension to strip, leading dots optional

    Returns:
        Base name, e.g. "Ballot"
    """
    suffix = "." + normalize_extension(extension)
    if filename.endswith(suffix):
        return filename[: -len(suffix)]
    return filename


def _load_json(file_path: Union[Path, str]) -> Any:
    try:
        with open(file_path) as f:
            return json.load(f)
    except (OSError, UnicodeDecodeError) as e:
        raise ArtifactParseError(f"Unable to read {file_path}: {e}") from e
    except json.JSONDecodeError as e:
        raise ArtifactParseError(f"Invalid JSON in {file_path}: {e}") from e


def parse_interface_descriptor(file_path: Union[Path, str]) -> List[Dict[str, Any]]:
    """
    Parse a .abi file.

    Args:
        file_path: Path to the interface descriptor

    Returns:
        The contract ABI, a list of function/event/constructor entries

    Raises:
        ArtifactParseError: If the file cannot be read, is not JSON, is empty,
            or is not a list of ABI entries
    """
    abi = _load_json(file_path)

    if not abi:
        raise ArtifactParseError(f"Empty interface descriptor: {file_path}")

    if not isinstance(abi, list) or not all(isinstance(item, dict) for item in abi):
        raise ArtifactParseError(
            f"Interface descriptor is not a list of ABI entries: {file_path}"
        )

    return abi


def parse_deployment_record(file_path: Union[Path, str]) -> Dict[str, Any]:
    """
    Parse a .deployed file.

    The file maps network identifiers to the list of addresses the contract
    was deployed to on that network, oldest first:

        {"1": ["0x..."], "3": ["0x...", "0x..."]}

    Args:
        file_path: Path to the deployment record

    Returns:
        Mapping of network identifier -> address history

    Raises:
        ArtifactParseError: If the file cannot be read, is not JSON,
            or is not a JSON object
    """
    record = _load_json(file_path)

    if not isinstance(record, dict):
        raise ArtifactParseError(f"Deployment record is not a JSON object: {file_path}")

    return record


def resolve_address(record: Dict[str, Any], network_id: str) -> Optional[str]:
    """
    Get the current address of a contract on a network.

    The most recent deployment wins: the last entry of the address history.

    Args:
        record: Parsed deployment record
        network_id: Active network identifier, e.g. "3"

    Returns:
        Address string, or None if the network has no deployments
    """
    history = record.get(str(network_id))

    if not history or not isinstance(history, list):
        return None

    return history[-1]
