import pytest

from simplechain.block import Block, create_block, genesis
from simplechain.proof import ProofOfWork
from simplechain.transaction import Transaction, coinbase_tx
from simplechain.tx import TxInput, TxOutput


def _tx(value):
    tx = Transaction(b"", [TxInput(b"\x01", 0, "alice")], [TxOutput(value, "bob")])
    tx.set_id()
    return tx


def test_hash_transactions_of_empty_ids():
    block = Block(b"", [coinbase_tx("alice")], b"", 0)
    assert block.hash_transactions().hex() == (
        "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"
    )


def test_hash_transactions_depends_on_order():
    first, second = _tx(1), _tx(2)
    forward = Block(b"", [first, second], b"", 0).hash_transactions()
    backward = Block(b"", [second, first], b"", 0).hash_transactions()
    assert forward != backward
    assert len(forward) == 32


def test_serialize_round_trip():
    block = Block(b"\x0a" * 32, [coinbase_tx("alice"), _tx(5)], b"\x0b" * 32, 42)
    assert Block.deserialize(block.serialize()) == block


def test_deserialize_rejects_garbage():
    with pytest.raises(ValueError):
        Block.deserialize(b"not a block")


def test_deserialize_rejects_missing_fields():
    with pytest.raises(ValueError):
        Block.deserialize(b'{"hash": "00"}')


def test_create_block_is_valid(capsys):
    txs = [_tx(3)]
    block = create_block(txs, b"\x02" * 32, 8)
    assert block.prev_hash == b"\x02" * 32
    assert block.transactions == txs
    assert ProofOfWork(block, 8).validate() is True
    out = capsys.readouterr().out
    assert f"Nonce: {block.nonce}" in out
    assert f"Hash: {block.hash.hex()}" in out


def test_genesis_has_no_previous_hash():
    coinbase = coinbase_tx("alice")
    block = genesis(coinbase, 8)
    assert block.prev_hash == b""
    assert block.transactions == [coinbase]


def test_format_layout():
    block = Block(b"\xff", [coinbase_tx("alice")], b"\x01", 7)
    lines = block.format().splitlines()
    assert lines[0] == "-----------"
    assert lines[-1] == "-----------"
    assert "Previous hash: 01" in lines
    assert "    - TxInput: ID: , Out: -1, Sig: Coins to alice" in lines
    assert "    - TxOutput: Value: 100, PubKey: alice" in lines
    assert "Hash: ff" in lines
    assert "Nonce: 7" in lines