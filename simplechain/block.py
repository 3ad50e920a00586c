"""Blocks: hashing, serialisation and mining."""

from __future__ import annotations

import hashlib
import json
from dataclasses import dataclass, field

from simplechain.proof import DIFFICULTY, ProofOfWork
from simplechain.transaction import Transaction

_RULE = "-----------"


@dataclass
class Block:
    """A mined block of transactions linked to its predecessor."""

    hash: bytes = b""
    transactions: list[Transaction] = field(default_factory=list)
    prev_hash: bytes = b""
    nonce: int = 0

    def hash_transactions(self) -> bytes:
        """Return the SHA-256 of the concatenated transaction ids."""
        return hashlib.sha256(b"".join(tx.id for tx in self.transactions)).digest()

    def serialize(self) -> bytes:
        """Encode the block as bytes."""
        payload = {
            "hash": self.hash.hex(),
            "transactions": [tx.to_dict() for tx in self.transactions],
            "prev_hash": self.prev_hash.hex(),
            "nonce": self.nonce,
        }
        return json.dumps(payload, sort_keys=True, separators=(",", ":")).encode("utf-8")

    @classmethod
    def deserialize(cls, data: bytes) -> "Block":
        """Decode a block produced by :meth:`serialize`."""
        try:
            payload = json.loads(data)
            return cls(
                hash=bytes.fromhex(payload["hash"]),
                transactions=[Transaction.from_dict(tx) for tx in payload["transactions"]],
                prev_hash=bytes.fromhex(payload["prev_hash"]),
                nonce=int(payload["nonce"]),
            )
        except (KeyError, TypeError, ValueError, AttributeError) as exc:
            raise ValueError(f"invalid block data: {exc}") from exc

    def format(self) -> str:
        """Return a human-readable description of the block."""
        lines = [_RULE, f"Previous hash: {self.prev_hash.hex()}", "Transactions:"]
        for tx in self.transactions:
            lines.append(f"  Transaction ID: {tx.id.hex()}")
            lines.append("  Inputs:")
            lines.extend(
                f"    - TxInput: ID: {tx_in.id.hex()}, Out: {tx_in.out}, Sig: {tx_in.sig}"
                for tx_in in tx.inputs
            )
            lines.append("  Outputs:")
            lines.extend(
                f"    - TxOutput: Value: {out.value}, PubKey: {out.pub_key}"
                for out in tx.outputs
            )
            lines.append("")
        lines.extend([f"Hash: {self.hash.hex()}", f"Nonce: {self.nonce}", _RULE])
        return "\n".join(lines)


def create_block(
    transactions: list[Transaction], prev_hash: bytes, difficulty: int = DIFFICULTY
) -> Block:
    """Mine a new block holding ``transactions`` on top of ``prev_hash``."""
    block = Block(b"", list(transactions), prev_hash, 0)
    nonce, digest = ProofOfWork(block, difficulty).run()
    block.hash = digest
    block.nonce = nonce
    print(block.format())
    return block


def genesis(coinbase: Transaction, difficulty: int = DIFFICULTY) -> Block:
    """Mine the first block of a chain."""
    return create_block([coinbase], b"", difficulty)