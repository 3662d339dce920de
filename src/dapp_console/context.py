"""Execution context construction for dapp-console."""

import asyncio
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional, Union

from .constants import SCRIPT_LOGGER_NAME, ZERO_ADDRESS
from .paths import script_location
from .text import to_text
from .transport import Transport
from .types import Registry


class ScriptConsole:
    """
    The `console` binding handed to user code.

    console.log(*values) prints its arguments separated by spaces, like
    print(). Every other attribute comes from the wrapped logger, so
    console.info("%s", x) and friends behave as on a logging.Logger.
    """

    def __init__(self, logger: logging.Logger):
        self.logger = logger

    def log(self, *values: Any) -> None:
        self.logger.info(" ".join(str(value) for value in values))

    def __getattr__(self, name: str) -> Any:
        return getattr(self.logger, name)


def utility_bindings() -> Dict[str, Any]:
    """
    Get the fixed bindings available to every script and REPL session.

    Returns:
        Mapping of binding name -> value
    """
    return {
        "console": ScriptConsole(logging.getLogger(SCRIPT_LOGGER_NAME)),
        "os": os,
        "path": os.path,
        "Path": Path,
        "asyncio": asyncio,
        "sleep": asyncio.sleep,
        "to_text": to_text,
        "ZERO_ADDRESS": ZERO_ADDRESS,
    }


def build_context(
    registry: Registry,
    transport: Transport,
    script_path: Optional[Union[Path, str]] = None,
    cwd: Optional[Union[Path, str]] = None,
) -> Dict[str, Any]:
    """
    Build the globals for one execution of user code.

    A new dict is returned on every call, so nothing a script assigns
    leaks into the next execution.

    Args:
        registry: Contract registry
        transport: Connected transport; its client is bound as `web3`
        script_path: Path of the script for --input-file runs
        cwd: Working directory to resolve script_path against
            (defaults to os.getcwd())

    Returns:
        Mapping of binding name -> value. With script_path it also holds
        `cwd`, `__file__`, `script_dir` and `script_name`.
    """
    context: Dict[str, Any] = dict(registry.contracts)
    context["web3"] = transport.web3
    context.update(utility_bindings())

    if script_path is not None:
        location = script_location(script_path, cwd)
        context.update(
            {
                "cwd": location.cwd,
                "__file__": location.filename,
                "script_dir": location.dirname,
                "script_name": location.basename,
            }
        )

    return context
