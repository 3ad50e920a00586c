"""A chain of mined blocks kept in a key-value store on disk."""

from __future__ import annotations

import sqlite3
from collections import defaultdict
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator

from simplechain.block import Block, create_block, genesis
from simplechain.proof import DIFFICULTY
from simplechain.transaction import Transaction, coinbase_tx
from simplechain.tx import UTXO

DB_PATH = "tmp/blocks"
DB_FILE = "blocks.db"
GENESIS_DATA = "First transaction from Genesis"
_LAST_HASH_KEY = b"lh"


class ChainExistsError(Exception):
    """Raised when creating a chain where one is already stored."""


class ChainNotFoundError(Exception):
    """Raised when opening a chain that has not been created."""


def _open(path: str | Path) -> sqlite3.Connection:
    directory = Path(path)
    directory.mkdir(parents=True, exist_ok=True)
    conn = sqlite3.connect(directory / DB_FILE)
    conn.execute(
        "CREATE TABLE IF NOT EXISTS kv (key BLOB PRIMARY KEY, value BLOB NOT NULL)"
    )
    conn.commit()
    return conn


def _get(conn: sqlite3.Connection, key: bytes) -> bytes:
    row = conn.execute("SELECT value FROM kv WHERE key = ?", (key,)).fetchone()
    if row is None:
        raise KeyError(f"key not found: {key.hex()}")
    return bytes(row[0])


def _put(conn: sqlite3.Connection, items: Iterable[tuple[bytes, bytes]]) -> None:
    with conn:
        conn.executemany("INSERT OR REPLACE INTO kv (key, value) VALUES (?, ?)", items)


@dataclass
class BlockchainIterator:
    """Walks the chain from the newest block back to the genesis block."""

    current_hash: bytes
    database: sqlite3.Connection

    def has_next(self) -> bool:
        """Return True while there is a block left to visit."""
        return len(self.current_hash) != 0

    def __iter__(self) -> "BlockchainIterator":
        return self

    def __next__(self) -> Block:
        if not self.has_next():
            raise StopIteration
        block = Block.deserialize(_get(self.database, self.current_hash))
        self.current_hash = block.prev_hash
        return block


@dataclass
class Blockchain:
    """The hash of the newest block and the store holding every block."""

    last_hash: bytes
    database: sqlite3.Connection
    difficulty: int = DIFFICULTY

    def add_block(self, transactions: list[Transaction]) -> Block:
        """Mine a block of ``transactions`` on top of the chain and store it."""
        last_hash = _get(self.database, _LAST_HASH_KEY)
        new_block = create_block(transactions, last_hash, self.difficulty)
        _put(
            self.database,
            [(new_block.hash, new_block.serialize()), (_LAST_HASH_KEY, new_block.hash)],
        )
        self.last_hash = new_block.hash
        return new_block

    def iterator(self) -> BlockchainIterator:
        """Return an iterator starting at the newest block."""
        return BlockchainIterator(self.last_hash, self.database)

    def __iter__(self) -> Iterator[Block]:
        return self.iterator()

    def find_utxos(self, address: str) -> list[UTXO]:
        """Return the outputs locked to ``address`` that no input spends."""
        utxos: list[UTXO] = []
        spent: defaultdict[str, list[int]] = defaultdict(list)

        for block in self:
            for tx in block.transactions:
                tx_id = tx.id.hex()
                for out_idx, output in enumerate(tx.outputs):
                    if out_idx in spent.get(tx_id, ()):
                        continue
                    if output.can_be_unlocked(address):
                        utxos.append(UTXO(tx_id, out_idx, output))

                if not tx.is_coinbase():
                    for tx_in in tx.inputs:
                        if tx_in.can_unlock(address):
                            spent[tx_in.id.hex()].append(tx_in.out)
        return utxos

    def find_spendable_outputs(self, address: str, amount: int) -> tuple[int, list[UTXO]]:
        """Collect unspent outputs until their total exceeds ``amount``."""
        accumulated = 0
        to_spend: list[UTXO] = []
        for utxo in self.find_utxos(address):
            to_spend.append(utxo)
            accumulated += utxo.output.value
            if accumulated > amount:
                break
        return accumulated, to_spend

    def close(self) -> None:
        """Close the underlying store."""
        self.database.close()

    def __enter__(self) -> "Blockchain":
        return self

    def __exit__(self, *args: object) -> None:
        self.close()


def db_exists(path: str | Path) -> bool:
    """Return True if a chain store exists in the directory ``path``."""
    return (Path(path) / DB_FILE).exists()


def init_blockchain(
    address: str, path: str | Path = DB_PATH, difficulty: int = DIFFICULTY
) -> Blockchain:
    """Create a chain whose genesis block rewards ``address``."""
    if db_exists(path):
        raise ChainExistsError("Blockchain already exists")

    conn = _open(path)
    try:
        block = genesis(coinbase_tx(address, GENESIS_DATA), difficulty)
        print("Genesis created")
        _put(conn, [(block.hash, block.serialize()), (_LAST_HASH_KEY, block.hash)])
    except BaseException:
        conn.close()
        raise
    return Blockchain(block.hash, conn, difficulty)


def continue_blockchain(path: str | Path = DB_PATH, difficulty: int = DIFFICULTY) -> Blockchain:
    """Open the chain stored in ``path``."""
    if not db_exists(path):
        raise ChainNotFoundError("No blockchain found, please create one first")

    conn = _open(path)
    try:
        last_hash = _get(conn, _LAST_HASH_KEY)
    except BaseException:
        conn.close()
        raise
    return Blockchain(last_hash, conn, difficulty)