"""Text decoding helpers exposed to user scripts."""

from typing import Optional, Union

from web3 import Web3

Primitive = Union[bytes, bytearray, int, bool]


def to_text(
    primitive: Optional[Primitive] = None,
    hexstr: Optional[str] = None,
    text: Optional[str] = None,
) -> str:
    """
    Decode a value to text like Web3.to_text, without trailing NUL padding.

    Fixed-width values such as bytes32 are right-padded with NUL characters.
    Written to a pipe, the padding ends the stream for many consumers and
    everything printed after it is lost.

        >>> to_text(b"Crook B" + b"\\x00" * 25)
        'Crook B'

    Args:
        primitive: Bytes, int or bool value
        hexstr: Hex encoded value, e.g. "0x43726f6f6b2042000000"
        text: Text value, returned with padding removed

    Returns:
        Decoded text with trailing NUL characters stripped
    """
    return Web3.to_text(primitive, hexstr=hexstr, text=text).rstrip("\x00")
