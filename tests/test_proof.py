import dataclasses
import hashlib

from simplechain.block import Block
from simplechain.proof import ProofOfWork, to_hex
from simplechain.transaction import coinbase_tx


def _block():
    return Block(b"", [coinbase_tx("alice")], b"\x01" * 32, 0)


def test_to_hex_big_endian():
    assert to_hex(1) == b"\x00" * 7 + b"\x01"
    assert to_hex(-1) == b"\xff" * 8


def test_default_target():
    assert ProofOfWork(_block()).target == 1 << 232


def test_custom_target():
    assert ProofOfWork(_block(), 8).target == 1 << 248


def test_init_nonce_layout():
    block = _block()
    pow_ = ProofOfWork(block, 8)
    data = pow_.init_nonce(5)
    assert data.startswith(block.prev_hash)
    assert data.endswith(to_hex(5) + to_hex(8))
    assert len(data) == 32 + 32 + 16


def test_run_finds_valid_nonce(capsys):
    block = _block()
    pow_ = ProofOfWork(block, 8)
    nonce, digest = pow_.run()
    assert digest == hashlib.sha256(pow_.init_nonce(nonce)).digest()
    assert int.from_bytes(digest, "big") < pow_.target
    block.nonce = nonce
    assert pow_.validate() is True
    assert "Performing pow..." in capsys.readouterr().out


def test_run_returns_first_valid_nonce():
    block = _block()
    nonce, _ = ProofOfWork(block, 8).run()
    earlier = [
        ProofOfWork(dataclasses.replace(block, nonce=n), 8).validate()
        for n in range(nonce)
    ]
    assert earlier == [False] * nonce
    found = ProofOfWork(dataclasses.replace(block, nonce=nonce), 8).validate()
    assert found is True