"""Proof of work over a block's contents."""

from __future__ import annotations

import hashlib
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from simplechain.block import Block

DIFFICULTY = 24
MAX_NONCE = 2**63 - 1


def to_hex(num: int) -> bytes:
    """Encode ``num`` as a big-endian signed 64-bit integer."""
    return num.to_bytes(8, "big", signed=True)


@dataclass
class ProofOfWork:
    """Searches for a nonce whose hash falls below the difficulty target."""

    block: "Block"
    difficulty: int = DIFFICULTY
    target: int = field(init=False)

    def __post_init__(self) -> None:
        self.target = 1 << (256 - self.difficulty)

    def init_nonce(self, nonce: int) -> bytes:
        """Return the bytes hashed for the given nonce."""
        return b"".join(
            (
                self.block.prev_hash,
                self.block.hash_transactions(),
                to_hex(nonce),
                to_hex(self.difficulty),
            )
        )

    def run(self) -> tuple[int, bytes]:
        """Find the first nonce meeting the target; return it with its hash."""
        print("Performing pow...")
        nonce = 0
        digest = b""
        while nonce < MAX_NONCE:
            digest = hashlib.sha256(self.init_nonce(nonce)).digest()
            if int.from_bytes(digest, "big") < self.target:
                break
            nonce += 1
        return nonce, digest

    def validate(self) -> bool:
        """Return True if the block's nonce meets the target."""
        digest = hashlib.sha256(self.init_nonce(self.block.nonce)).digest()
        return int.from_bytes(digest, "big") < self.target