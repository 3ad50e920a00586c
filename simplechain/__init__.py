"""A small proof-of-work blockchain with UTXO transactions, wallets and a command line."""

__version__ = "0.1.0"