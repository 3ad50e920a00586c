"""Command-line interface to the chain and the wallets."""

from __future__ import annotations

import argparse
import sys

from simplechain.blockchain import (
    DB_PATH,
    ChainExistsError,
    ChainNotFoundError,
    continue_blockchain,
    init_blockchain,
)
from simplechain.proof import DIFFICULTY, ProofOfWork
from simplechain.transaction import InsufficientFundsError, new_transaction
from simplechain.wallets import WALLET_FILE, create_wallets

CHAIN_PATH = DB_PATH

_USAGE = (
    "Usage: ",
    "getBalance -address ADDRESS - Get balance for ADDRESS",
    "createBlockchain -address ADDRESS - Create a blockchain and reward the mining fee",
    "printChain - Print the blocks in the chain",
    "send -from FROM -to TO -amount AMOUNT - Send amount of coins from one address to another",
    "createWallet - Creates a new wallet",
    "listAddress - List address in the wallet file",
)


def _print_usage() -> None:
    print("\n".join(_USAGE))


def _parser(command: str) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog=command, allow_abbrev=False)
    if command == "getBalance":
        parser.add_argument("-address", "--address", default="",
                            help="The address to get balance for")
    elif command == "createBlockchain":
        parser.add_argument("-address", "--address", default="",
                            help="The address to send genesis block reward to")
    elif command == "send":
        parser.add_argument("-from", "--from", dest="sender", default="",
                            help="Source wallet address")
        parser.add_argument("-to", "--to", dest="recipient", default="",
                            help="Destination wallet address")
        parser.add_argument("-amount", "--amount", type=int, default=0,
                            help="Amount to send")
    return parser


def _create_blockchain(address: str) -> int:
    try:
        chain = init_blockchain(address, CHAIN_PATH, DIFFICULTY)
    except ChainExistsError as exc:
        print(exc)
        return 0
    chain.close()
    print("Finished Creating chain")
    return 0


def _get_balance(address: str) -> int:
    try:
        chain = continue_blockchain(CHAIN_PATH, DIFFICULTY)
    except ChainNotFoundError as exc:
        print(exc)
        return 0
    with chain:
        balance = sum(utxo.output.value for utxo in chain.find_utxos(address))
    print(f"Balance of {address}: {balance}")
    return 0


def _print_chain() -> int:
    try:
        chain = continue_blockchain(CHAIN_PATH, DIFFICULTY)
    except ChainNotFoundError as exc:
        print(exc)
        return 0
    with chain:
        for block in chain:
            print(block.format())
            valid = ProofOfWork(block, chain.difficulty).validate()
            print(f"Pow: {str(valid).lower()}")
            print()
    return 0


def _send(sender: str, recipient: str, amount: int) -> int:
    try:
        chain = continue_blockchain(CHAIN_PATH, DIFFICULTY)
    except ChainNotFoundError as exc:
        print(exc)
        return 0
    with chain:
        try:
            tx = new_transaction(sender, recipient, amount, chain)
        except InsufficientFundsError as exc:
            print(exc, file=sys.stderr)
            return 1
        chain.add_block([tx])
    print(
        f"Transaction send {amount} from {sender} to {recipient} success, "
        "and a new block created with single transaction"
    )
    return 0


def _list_addresses() -> int:
    for address in create_wallets(WALLET_FILE).get_all_addresses():
        print(address)
    return 0


def _create_wallet() -> int:
    wallets = create_wallets(WALLET_FILE)
    address = wallets.add_wallet()
    wallets.save_file()
    print(f"New address is {address}")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Run one command and return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    commands = {"getBalance", "createBlockchain", "printChain", "send",
                "createWallet", "listAddress"}
    if not args or args[0] not in commands:
        _print_usage()
        return 0

    command = args[0]
    parser = _parser(command)
    options = parser.parse_args(args[1:])

    if command == "getBalance":
        if not options.address:
            parser.print_help(sys.stderr)
            return 0
        return _get_balance(options.address)
    if command == "createBlockchain":
        if not options.address:
            parser.print_help(sys.stderr)
            return 0
        return _create_blockchain(options.address)
    if command == "printChain":
        return _print_chain()
    if command == "send":
        if not options.sender or not options.recipient or options.amount <= 0:
            parser.print_help(sys.stderr)
            return 0
        return _send(options.sender, options.recipient, options.amount)
    if command == "createWallet":
        return _create_wallet()
    return _list_addresses()


if __name__ == "__main__":
    raise SystemExit(main())