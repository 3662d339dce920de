"""Path utilities for dapp-console."""

import os
from pathlib import Path
from typing import Optional, Union

from .types import ScriptLocation


def resolve_contracts_dir(directory: Union[Path, str]) -> Path:
    """
    Get the absolute path of a contracts directory.

    Args:
        directory: Contracts directory, relative to the working directory or absolute

    Returns:
        Absolute path
    """
    return Path(directory).absolute()


def script_location(
    script_path: Union[Path, str], cwd: Optional[Union[Path, str]] = None
) -> ScriptLocation:
    """
    Compute the location bindings of a script run with --input-file.

    Args:
        script_path: Script path as given on the command line
        cwd: Working directory to resolve against (defaults to os.getcwd())

    Returns:
        ScriptLocation with the working directory, the absolute normalized
        script path, its directory and its filename
    """
    if cwd is None:
        cwd = os.getcwd()
    cwd = str(cwd)

    filename = os.path.normpath(os.path.join(cwd, os.fspath(script_path)))

    return ScriptLocation(
        cwd=cwd,
        filename=filename,
        dirname=os.path.dirname(filename),
        basename=os.path.basename(filename),
    )
