# simplechain

A small, self-contained blockchain. Blocks are mined with SHA-256 proof of
work, value moves between addresses through unspent transaction outputs
(UTXOs), and wallets hold P-256 key pairs whose addresses are
Base58Check-encoded (version byte, RIPEMD-160 of SHA-256 of the public key,
and a four-byte double-SHA-256 checksum).

## Installation

```
pip install .
```

Installing the package puts a `simplechain` command on your path.

## Command line

All paths are relative to the current directory. The chain is kept in an
SQLite file, `./tmp/blocks/blocks.db`; wallets are kept as JSON in
`./tmp/wallets.data`.

```
simplechain createWallet
simplechain listAddress
simplechain createBlockchain -address ADDRESS
simplechain getBalance -address ADDRESS
simplechain send -from FROM -to TO -amount AMOUNT
simplechain printChain
```

Options may be written with one dash or two (`-address` or `--address`).

- `createWallet` generates a new key pair, saves it to the wallet file and
  prints its address.
- `listAddress` prints every address stored in the wallet file.
- `createBlockchain` mines a genesis block that pays the reward of 100 coins
  to `ADDRESS`. If a chain already exists it prints
  `Blockchain already exists` and does nothing.
- `getBalance` sums the unspent outputs that belong to `ADDRESS`.
- `send` spends enough of the sender's outputs to cover `AMOUNT`, returns any
  change to the sender, and mines a new block holding that one transaction.
  If the sender cannot cover the amount, it prints `Error, Not enough funds!`
  to standard error and exits with status 1.
- `printChain` walks the chain from the newest block back to the genesis
  block, printing each block's transactions, hash and nonce, followed by
  `Pow: true` or `Pow: false`.

`getBalance`, `send` and `printChain` print
`No blockchain found, please create one first` when no chain exists. A
missing required option prints that command's help to standard error. Running
the command with no arguments, or with an unknown command, prints the usage
text.

Mining prints `Performing pow...` and then the finished block. The command
line mines at a difficulty of 24 leading zero bits, which can take a while.

## Library use

```python
from simplechain.blockchain import init_blockchain, continue_blockchain
from simplechain.transaction import new_transaction

with init_blockchain("alice", path="./tmp/blocks", difficulty=16) as chain:
    pass

with continue_blockchain(path="./tmp/blocks", difficulty=16) as chain:
    tx = new_transaction("alice", "bob", 30, chain)
    chain.add_block([tx])
    total, outputs = chain.find_spendable_outputs("bob", 30)
    for block in chain:
        print(block.format())
```

- `init_blockchain` raises `ChainExistsError` if a chain is already stored at
  `path`; `continue_blockchain` raises `ChainNotFoundError` if none is.
- `Blockchain.find_utxos(address)` returns the `UTXO` records locked to an
  address; `find_spendable_outputs(address, amount)` collects them until their
  total exceeds `amount` and returns the total with the records.
- `new_transaction` raises `InsufficientFundsError` (a `ValueError`) when the
  sender's outputs do not cover the amount.
- `Block.serialize()` / `Block.deserialize()` and `Transaction.to_dict()` /
  `Transaction.from_dict()` give JSON encodings; `ProofOfWork(block,
  difficulty).validate()` checks a block's nonce.
- `simplechain.base58` provides `base58_encode` and `base58_decode`.

Wallets can be managed directly:

```python
from simplechain.wallets import create_wallets

wallets = create_wallets("./tmp/wallets.data")
address = wallets.add_wallet()
wallets.save_file()
print(wallets.get_all_addresses())
```

`create_wallets` starts with an empty collection when the file does not exist.

## What it does not do

- There is no network: no peers, no block propagation, no consensus beyond the
  local proof of work.
- Transactions are not cryptographically signed. An input's signature field is
  simply the sender's address string, and outputs are locked to an address
  string; the wallet keys are used only to derive addresses.

## Running the tests

```
pip install .[test]
pytest
```