"""
Address derivation and "<chain>-<bech32>" text tests.
"""

import pytest
from bech32 import bech32_encode, convertbits

from avalanche_signer.address import Address
from avalanche_signer.crypto import Secp256k1PrivateKey
from avalanche_signer.networks import FUJI, LOCAL, MAINNET
from avalanche_signer.runtime.errors import ErrorCode, InvalidAddressError

HASH = bytes.fromhex("751e76e8199196d454941c45d1b3a323f1433bd6")


def _text(key_hash: bytes, chain: str = "X", hrp: str = "avax") -> str:
    return f"{chain}-{bech32_encode(hrp, convertbits(key_hash, 8, 5, True))}"


class TestAddressDerivation:
    """Test addresses derived from keys."""

    def test_from_public_key(self):
        """Test the address hash is RIPEMD-160(SHA-256(compressed key))."""
        key = Secp256k1PrivateKey((1).to_bytes(32, "big"))
        assert Address.from_public_key(key.public_key()).key_hash == HASH

    def test_from_public_key_bytes(self):
        """Test raw compressed key bytes are accepted."""
        key = Secp256k1PrivateKey((1).to_bytes(32, "big"))
        assert Address.from_public_key(key.public_key().to_bytes()).to_bytes() == HASH

    def test_invalid_public_key(self):
        """Test bytes that are not a key raise an address error."""
        with pytest.raises(InvalidAddressError) as exc_info:
            Address.from_public_key(b"\x05" * 33)
        assert exc_info.value.code == ErrorCode.INVALID_PUBLIC_KEY

    def test_hash_length_enforced(self):
        """Test only 20-byte hashes make an address."""
        with pytest.raises(InvalidAddressError):
            Address(b"\x01" * 19)


class TestAddressText:
    """Test parsing and rendering of address strings."""

    def test_parse_x_chain(self):
        """Test parsing an X-chain address."""
        address = Address.from_string(_text(HASH))
        assert address.key_hash == HASH
        assert address.chain == "X"

    def test_parse_p_chain(self):
        """Test P-chain addresses parse to the same hash."""
        address = Address.from_string(_text(HASH, "P"))
        assert address.chain == "P"
        assert address == Address.from_string(_text(HASH))

    def test_string_roundtrip(self):
        """Test str() renders the parsed text back."""
        text = _text(HASH)
        assert str(Address.from_string(text)) == text
        p_text = _text(HASH, "P")
        assert str(Address.from_string(p_text)) == p_text

    def test_str_of_derived_address(self):
        """Test derived addresses render with the default chain."""
        assert str(Address(HASH)) == _text(HASH)

    @pytest.mark.parametrize("text", [
        "",
        "avax1qqqq",
        "-" + _text(HASH)[2:],
        "X-",
        "X-avax1invalid",
        "X-" + _text(HASH)[2:-1] + ("q" if _text(HASH)[-1] != "q" else "p"),
    ])
    def test_invalid_strings(self, text):
        """Test malformed text raises."""
        with pytest.raises(InvalidAddressError):
            Address.from_string(text)
        assert not Address.is_valid(text)

    def test_multi_letter_prefix_rejected(self):
        """Test the whole prefix must be the chain letter."""
        text = "A" + _text(HASH)
        assert text.startswith("AX-")
        with pytest.raises(InvalidAddressError) as exc_info:
            Address.from_string(text)
        assert exc_info.value.code == ErrorCode.INVALID_CHAIN

    def test_unknown_chain_rejected(self):
        """Test chain letters other than X and P are rejected."""
        with pytest.raises(InvalidAddressError) as exc_info:
            Address.from_string(_text(HASH, "C"))
        assert exc_info.value.code == ErrorCode.INVALID_CHAIN

    def test_wrong_hrp_rejected(self):
        """Test a different network prefix is rejected unless requested."""
        text = _text(HASH, hrp="fuji")
        assert not Address.is_valid(text)
        assert Address.from_string(text, hrp="fuji").key_hash == HASH

    def test_wrong_payload_length_rejected(self):
        """Test a valid bech32 string of the wrong size is rejected."""
        with pytest.raises(InvalidAddressError):
            Address.from_string(_text(HASH[:10]))

    def test_error_is_value_error(self):
        """Test address errors can be caught as ValueError."""
        with pytest.raises(ValueError):
            Address.from_string("not an address")

    def test_is_valid(self):
        """Test is_valid on well formed text."""
        assert Address.is_valid(_text(HASH))


class TestAddressNetworks:
    """Test network presets standing in for the bech32 prefix."""

    def test_render_with_network(self):
        """Test an address built for a network renders that network's prefix."""
        assert str(Address(HASH, hrp=FUJI)) == _text(HASH, hrp="fuji")
        assert Address(HASH, hrp=LOCAL).hrp == "local"

    def test_parse_with_network(self):
        """Test parsing against a preset checks its prefix."""
        text = _text(HASH, "P", hrp="fuji")
        address = Address.from_string(text, hrp=FUJI)
        assert address.key_hash == HASH
        assert address.hrp == "fuji"
        assert str(address) == text
        assert not Address.is_valid(text, hrp=MAINNET)

    def test_from_public_key_with_network(self):
        """Test derived addresses take the preset prefix."""
        key = Secp256k1PrivateKey((1).to_bytes(32, "big"))
        address = Address.from_public_key(key.public_key(), "X", FUJI)
        assert str(address) == _text(HASH, hrp="fuji")

    def test_mainnet_matches_default(self):
        """Test the mainnet preset equals the default prefix."""
        assert str(Address(HASH, hrp=MAINNET)) == str(Address(HASH))


class TestAddressOrdering:
    """Test equality and ordering use the raw hash only."""

    def test_equality_ignores_chain(self):
        """Test X and P forms of one hash are equal."""
        assert Address(HASH, "X") == Address(HASH, "P")
        assert hash(Address(HASH, "X")) == hash(Address(HASH, "P"))

    def test_sort_by_hash_bytes(self):
        """Test sorting is byte-wise on the hash."""
        a = Address(b"\x01" * 20)
        b = Address(b"\x02" + b"\x00" * 19)
        c = Address(b"\xff" * 20)
        assert sorted([c, a, b]) == [a, b, c]
        assert a < b <= b < c
