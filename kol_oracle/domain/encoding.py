"""Fixed-width integer encoding understood by the oracle callback."""

from __future__ import annotations

from typing import Union

UINT256_BYTES = 32
UINT256_MAX = (1 << (UINT256_BYTES * 8)) - 1


def encode_uint256(value: int) -> bytes:
    """Encode ``value`` as a 32-byte big-endian unsigned integer."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"uint256 value must be an int, got {type(value).__name__}")
    if value < 0 or value > UINT256_MAX:
        raise ValueError(f"uint256 value out of range: {value}")
    return value.to_bytes(UINT256_BYTES, "big")


def encode_result(found: bool) -> bytes:
    return encode_uint256(1 if found else 0)


def decode_uint256(payload: Union[bytes, str]) -> int:
    """Decode raw bytes or a ``0x`` hex string holding exactly one uint256."""
    if isinstance(payload, str):
        text = payload.strip()
        if text[:2].lower() == "0x":
            text = text[2:]
        try:
            payload = bytes.fromhex(text)
        except ValueError as exc:
            raise ValueError(f"invalid hex payload: {payload!r}") from exc
    if len(payload) != UINT256_BYTES:
        raise ValueError(f"uint256 payload must be {UINT256_BYTES} bytes, got {len(payload)}")
    return int.from_bytes(payload, "big")


def to_hex(payload: bytes) -> str:
    return "0x" + payload.hex()


__all__ = [
    "UINT256_BYTES",
    "UINT256_MAX",
    "decode_uint256",
    "encode_result",
    "encode_uint256",
    "to_hex",
]
