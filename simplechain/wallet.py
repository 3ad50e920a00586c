"""Key pairs and the addresses derived from them."""

from __future__ import annotations

import hashlib
from dataclasses import dataclass

from Crypto.Hash import RIPEMD160
from Crypto.PublicKey import ECC

from simplechain.base58 import base58_encode

CHECKSUM_LENGTH = 4
VERSION = b"\x00"
CURVE = "P-256"


def _int_bytes(value: int) -> bytes:
    return value.to_bytes((value.bit_length() + 7) // 8, "big")


@dataclass
class Wallet:
    """A P-256 private key with its public key bytes."""

    private_key: ECC.EccKey
    public_key: bytes

    def address(self) -> str:
        """Return the Base58 address: version, key hash and checksum."""
        versioned = VERSION + public_key_hash(self.public_key)
        return base58_encode(versioned + checksum(versioned))


def new_key_pair() -> tuple[ECC.EccKey, bytes]:
    """Generate a private key and its public key as X followed by Y."""
    key = ECC.generate(curve=CURVE)
    point = key.pointQ
    return key, _int_bytes(int(point.x)) + _int_bytes(int(point.y))


def make_wallet() -> Wallet:
    """Create a wallet with a fresh key pair."""
    private_key, public_key = new_key_pair()
    return Wallet(private_key, public_key)


def public_key_hash(public_key: bytes) -> bytes:
    """Return RIPEMD-160 of SHA-256 of the public key."""
    sha = hashlib.sha256(public_key).digest()
    return RIPEMD160.new(sha).digest()


def checksum(versioned_hash: bytes) -> bytes:
    """Return the first bytes of a double SHA-256."""
    first = hashlib.sha256(versioned_hash).digest()
    return hashlib.sha256(first).digest()[:CHECKSUM_LENGTH]