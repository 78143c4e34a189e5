"""
Test bootstrap:
- Put tests/ on sys.path so helpers is importable from every subdirectory
- Provide deterministic keys, addresses and transactions
"""
import pathlib
import sys

import pytest

TESTS_DIR = pathlib.Path(__file__).resolve().parent

if str(TESTS_DIR) not in sys.path:
    sys.path.insert(0, str(TESTS_DIR))

from helpers.factories import key_address, mk_address, mk_base_tx, mk_input, mk_private_key  # noqa: E402


@pytest.fixture
def private_key():
    """Deterministic secp256k1 private key."""
    return mk_private_key(1)


@pytest.fixture
def second_private_key():
    """A second deterministic key with a different address."""
    return mk_private_key(2)


@pytest.fixture
def key_addr(private_key):
    """Address of the primary test key."""
    return key_address(private_key)


@pytest.fixture
def spendable_addresses(key_addr):
    """Spendable list holding the test key address plus two unrelated hashes."""
    return [mk_address(0xFE), key_addr, mk_address(0x01)]


@pytest.fixture
def signer_index(spendable_addresses, key_addr):
    """Index of the test key address in the hash-sorted spendable list."""
    return sorted(spendable_addresses).index(key_addr)


@pytest.fixture
def single_input_tx(spendable_addresses, signer_index):
    """Base transaction with one input that the primary key can sign."""
    return mk_base_tx(inputs=[mk_input(spendable_addresses, indices=[signer_index])])
