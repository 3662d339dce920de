"""Shared pytest fixtures for dapp-console tests."""

import json
import shutil
from pathlib import Path
from typing import Any, Callable, Dict, List

import pytest
from web3 import Web3

from dapp_console.transport import Transport


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def ballot_abi(fixtures_dir: Path) -> List[Dict[str, Any]]:
    """Load and return the sample Ballot ABI."""
    with open(fixtures_dir / "contracts" / "Ballot.abi") as f:
        return json.load(f)


@pytest.fixture
def token_abi(fixtures_dir: Path) -> List[Dict[str, Any]]:
    """Load and return the sample Token ABI."""
    with open(fixtures_dir / "contracts" / "Token.abi") as f:
        return json.load(f)


@pytest.fixture
def contracts_dir(tmp_path: Path, fixtures_dir: Path) -> Path:
    """Copy the sample contracts directory (Ballot deployed, Token not) to tmp_path."""
    target = tmp_path / "out"
    shutil.copytree(fixtures_dir / "contracts", target)
    return target


@pytest.fixture
def write_artifact() -> Callable[[Path, str, Any], Path]:
    """Return a helper that writes a JSON (or raw string) artifact file."""

    def _write(directory: Path, filename: str, content: Any) -> Path:
        directory.mkdir(parents=True, exist_ok=True)
        path = directory / filename
        if isinstance(content, str):
            path.write_text(content)
        else:
            path.write_text(json.dumps(content))
        return path

    return _write


@pytest.fixture
def web3_client() -> Web3:
    """A web3 client for an endpoint that is never contacted."""
    return Web3(Web3.HTTPProvider("http://localhost:8545"))


@pytest.fixture
def transport(web3_client: Web3) -> Transport:
    """Transport on network "3" that never makes RPC calls."""
    return Transport(web3_client, "3")
