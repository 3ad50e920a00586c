"""Transaction inputs, outputs and unspent-output records."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class TxInput:
    """A reference to an earlier output, signed by its owner."""

    id: bytes
    out: int
    sig: str

    def can_unlock(self, data: str) -> bool:
        """Return True if this input was signed with ``data``."""
        return self.sig == data


@dataclass(frozen=True)
class TxOutput:
    """An amount of coins locked to a public key."""

    value: int
    pub_key: str

    def can_be_unlocked(self, data: str) -> bool:
        """Return True if ``data`` may spend this output."""
        return self.pub_key == data


@dataclass(frozen=True)
class UTXO:
    """An unspent output, located by transaction id and output index."""

    tx_id: str
    out_idx: int
    output: TxOutput