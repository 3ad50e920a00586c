"""A collection of wallets persisted to a file."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path

from Crypto.PublicKey import ECC

from simplechain.wallet import CURVE, Wallet, _int_bytes, make_wallet

WALLET_FILE = "tmp/wallets.data"


@dataclass
class Wallets:
    """Wallets keyed by address, stored at ``path``."""

    path: Path = Path(WALLET_FILE)
    wallets: dict[str, Wallet] = field(default_factory=dict)

    def save_file(self) -> None:
        """Write every wallet's private scalar and public key to the file."""
        records = {
            address: {
                "d": _int_bytes(int(wallet.private_key.d)).hex(),
                "pub": wallet.public_key.hex(),
            }
            for address, wallet in self.wallets.items()
        }
        path = Path(self.path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(records, sort_keys=True), encoding="utf-8")

    def load_file(self) -> None:
        """Replace the wallets with those stored in the file.

        Raises FileNotFoundError if the file is missing and ValueError if it
        cannot be decoded.
        """
        text = Path(self.path).read_text(encoding="utf-8")
        try:
            records = json.loads(text)
            loaded = {
                address: Wallet(
                    ECC.construct(curve=CURVE, d=int.from_bytes(bytes.fromhex(rec["d"]), "big")),
                    bytes.fromhex(rec["pub"]),
                )
                for address, rec in records.items()
            }
        except (KeyError, TypeError, AttributeError, ValueError) as exc:
            raise ValueError(f"invalid wallet file: {exc}") from exc
        self.wallets = loaded

    def add_wallet(self) -> str:
        """Create a wallet, store it and return its address."""
        wallet = make_wallet()
        address = wallet.address()
        self.wallets[address] = wallet
        return address

    def get_wallet(self, address: str) -> Wallet:
        """Return the wallet for ``address``; raise KeyError if unknown."""
        return self.wallets[address]

    def get_all_addresses(self) -> list[str]:
        """Return every stored address."""
        return list(self.wallets)


def create_wallets(path: str | Path = WALLET_FILE) -> Wallets:
    """Load the wallets at ``path``, or start empty if the file is missing."""
    wallets = Wallets(Path(path))
    try:
        wallets.load_file()
    except FileNotFoundError:
        pass
    return wallets