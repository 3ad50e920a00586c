"""Base58 encoding with the Bitcoin alphabet."""

from __future__ import annotations

ALPHABET = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"
_INDEX = {char: value for value, char in enumerate(ALPHABET)}


def base58_encode(data: bytes) -> str:
    """Encode bytes as a Base58 string; leading zero bytes become '1'."""
    stripped = data.lstrip(b"\x00")
    padding = len(data) - len(stripped)
    num = int.from_bytes(stripped, "big")
    digits = []
    while num:
        num, rem = divmod(num, 58)
        digits.append(ALPHABET[rem])
    return "1" * padding + "".join(reversed(digits))


def base58_decode(text: str | bytes) -> bytes:
    """Decode a Base58 string; raise ValueError on empty or invalid input."""
    if isinstance(text, (bytes, bytearray)):
        text = bytes(text).decode("ascii")
    if not text:
        raise ValueError("zero length string")
    num = 0
    for char in text:
        try:
            num = num * 58 + _INDEX[char]
        except KeyError:
            raise ValueError(f"invalid base58 character {char!r}") from None
    padding = len(text) - len(text.lstrip("1"))
    body = num.to_bytes((num.bit_length() + 7) // 8, "big")
    return b"\x00" * padding + body