"""JSON-RPC transport for dapp-console, backed by web3."""

import logging
from typing import Any, Dict, List, Optional

import requests
from web3 import Web3
from web3.exceptions import Web3Exception

from .exceptions import TransportConnectionError

logger = logging.getLogger(__name__)


def endpoint_uri(host: str, port: int, tls: bool = False) -> str:
    """
    Build the JSON-RPC endpoint URL.

    Args:
        host: Node hostname
        port: Node port
        tls: Use https instead of http

    Returns:
        URL such as "http://localhost:8545"
    """
    scheme = "https" if tls else "http"
    return f"{scheme}://{host}:{port}"


class Transport:
    """A connected web3 client and the network it is connected to."""

    def __init__(self, web3: Web3, network_id: str):
        """
        Wrap an existing web3 client.

        Use Transport.connect() to open a new connection.

        Args:
            web3: web3 client
            network_id: Active network identifier, as returned by net_version
        """
        self.web3 = web3
        self.network_id = str(network_id)

    @classmethod
    def connect(
        cls,
        host: str,
        port: int,
        tls: bool = False,
        session: Optional[requests.Session] = None,
    ) -> "Transport":
        """
        Connect to a JSON-RPC node and read its network identifier.

        Args:
            host: Node hostname
            port: Node port
            tls: Use https
            session: requests session to send JSON-RPC calls with

        Returns:
            Connected Transport

        Raises:
            TransportConnectionError: If the node is unreachable or does not
                report a network identifier
        """
        uri = endpoint_uri(host, port, tls)
        if session is None:
            session = requests.Session()

        web3 = Web3(Web3.HTTPProvider(uri, session=session))

        if not web3.is_connected():
            raise TransportConnectionError("[Error] Unable to connect to Ethereum client")

        try:
            network_id = web3.net.version
        except (requests.RequestException, Web3Exception, ValueError) as e:
            raise TransportConnectionError(
                f"[Error] Unable to read network id from {uri}: {e}"
            ) from e

        logger.info("Connected to %s (network %s)", uri, network_id)
        return cls(web3, network_id)

    def contract(self, abi: List[Dict[str, Any]], address: Optional[str] = None) -> Any:
        """
        Build a contract proxy.

        Args:
            abi: Contract ABI
            address: Deployed address; None for an unbound contract factory

        Returns:
            web3 contract factory, or contract instance bound to address

        Raises:
            ValueError: If address is not a valid hex address
        """
        if address is None:
            return self.web3.eth.contract(abi=abi)

        return self.web3.eth.contract(address=Web3.to_checksum_address(address), abi=abi)
