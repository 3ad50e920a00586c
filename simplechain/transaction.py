"""Transactions: creation, identification and serialisation."""

from __future__ import annotations

import hashlib
import json
from dataclasses import dataclass, field
from typing import Any, Protocol

from simplechain.tx import UTXO, TxInput, TxOutput

REWARD = 100


class InsufficientFundsError(ValueError):
    """Raised when an address cannot cover the amount it tries to send."""


class _SpendableSource(Protocol):
    def find_spendable_outputs(self, address: str, amount: int) -> tuple[int, list[UTXO]]:
        ...


@dataclass
class Transaction:
    """A set of inputs spending earlier outputs and the new outputs they fund."""

    id: bytes = b""
    inputs: list[TxInput] = field(default_factory=list)
    outputs: list[TxOutput] = field(default_factory=list)

    def set_id(self) -> None:
        """Set the id to the SHA-256 of the transaction's canonical encoding."""
        encoded = json.dumps(self.to_dict(), sort_keys=True, separators=(",", ":"))
        self.id = hashlib.sha256(encoded.encode("utf-8")).digest()

    def is_coinbase(self) -> bool:
        """Return True for a reward transaction that spends nothing."""
        return (
            len(self.inputs) == 1
            and len(self.inputs[0].id) == 0
            and self.inputs[0].out == -1
        )

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-compatible representation."""
        return {
            "id": self.id.hex(),
            "inputs": [
                {"id": tx_in.id.hex(), "out": tx_in.out, "sig": tx_in.sig}
                for tx_in in self.inputs
            ],
            "outputs": [
                {"value": out.value, "pub_key": out.pub_key} for out in self.outputs
            ],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Transaction":
        """Build a transaction from the output of :meth:`to_dict`."""
        return cls(
            id=bytes.fromhex(data["id"]),
            inputs=[
                TxInput(bytes.fromhex(item["id"]), int(item["out"]), str(item["sig"]))
                for item in data["inputs"]
            ],
            outputs=[
                TxOutput(int(item["value"]), str(item["pub_key"]))
                for item in data["outputs"]
            ],
        )


def coinbase_tx(to_address: str, data: str = "") -> Transaction:
    """Create the reward transaction paying ``REWARD`` to ``to_address``."""
    if not data:
        data = f"Coins to {to_address}"
    tx_in = TxInput(b"", -1, data)
    tx_out = TxOutput(REWARD, to_address)
    return Transaction(b"", [tx_in], [tx_out])


def new_transaction(
    sender: str, recipient: str, amount: int, chain: _SpendableSource
) -> Transaction:
    """Create a transaction moving ``amount`` from ``sender`` to ``recipient``."""
    total, utxos = chain.find_spendable_outputs(sender, amount)
    if total < amount:
        raise InsufficientFundsError("Error, Not enough funds!")

    inputs = [TxInput(bytes.fromhex(utxo.tx_id), utxo.out_idx, sender) for utxo in utxos]
    outputs = [TxOutput(amount, recipient)]
    if total - amount > 0:
        outputs.append(TxOutput(total - amount, sender))

    transaction = Transaction(b"", inputs, outputs)
    transaction.set_id()
    return transaction