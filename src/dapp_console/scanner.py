"""Artifact discovery for dapp-console."""

import os
from typing import List, Union

from .exceptions import ArtifactDirectoryError


def normalize_extension(extension: str) -> str:
    """
    Strip leading dots from a file extension.

    Args:
        extension: Extension with or without dots, e.g. ".abi" or "abi"

    Returns:
        Bare extension, e.g. "abi"
    """
    return extension.lstrip(".")


def list_artifacts(directory: Union[str, os.PathLike], extension: str) -> List[str]:
    """
    List filenames in a directory that end with the given extension.

    Filenames are returned in directory-listing order, without sorting.

    Args:
        directory: Contracts directory
        extension: File extension, leading dots optional

    Returns:
        List of matching filenames (not paths)

    Raises:
        ArtifactDirectoryError: If the directory cannot be listed
    """
    suffix = "." + normalize_extension(extension)

    try:
        entries = os.listdir(directory)
    except OSError as e:
        raise ArtifactDirectoryError(
            e.errno, f"Unable to read contracts directory: {e.strerror}", str(directory)
        ) from e

    return [entry for entry in entries if entry.endswith(suffix)]
