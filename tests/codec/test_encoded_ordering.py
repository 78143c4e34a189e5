"""
Encoder entry point and encoded-byte ordering tests.
"""

import hashlib

from avalanche_signer.codec import encode_node, encode_signed, encode_unsigned, hash_for_signing
from avalanche_signer.codec.encoder import compare_encoded, sort_encoded
from avalanche_signer.tx import (
    NFTMintOutput,
    SECP256k1Credential,
    SECP256k1MintOutput,
    SECP256k1TransferOutput,
    SignedTransaction,
)

from helpers.factories import BLOCKCHAIN_ID, mk_address, mk_base_tx


class TestCodecEnvelope:
    """Test the codec id envelope around transactions."""

    def test_unsigned_starts_with_codec_id(self):
        """Test unsigned encoding is codec id plus body."""
        tx = mk_base_tx()
        encoded = encode_unsigned(tx)
        assert encoded[:2] == b"\x00\x00"
        assert encoded[2:] == encode_node(tx)

    def test_body_header_fields(self):
        """Test type id, network id and blockchain id lead the body."""
        encoded = encode_unsigned(mk_base_tx())
        assert encoded[2:6] == b"\x00\x00\x00\x00"
        assert encoded[6:10] == b"\x00\x00\x00\x01"
        assert encoded[10:42] == BLOCKCHAIN_ID

    def test_signed_appends_credentials(self):
        """Test signed encoding is unsigned encoding plus credential list."""
        tx = mk_base_tx()
        signed = SignedTransaction(tx, [SECP256k1Credential([])])
        encoded = encode_signed(signed)
        unsigned = encode_unsigned(tx)
        assert encoded.startswith(unsigned)
        assert encoded[len(unsigned):] == bytes.fromhex("00000001" "00000009" "00000000")

    def test_hash_for_signing_is_sha256_of_unsigned(self):
        """Test the signing digest hashes codec id plus body."""
        tx = mk_base_tx(memo=b"hello")
        assert hash_for_signing(tx) == hashlib.sha256(encode_unsigned(tx)).digest()


class TestEncodedOrdering:
    """Test the byte-wise ordering of polymorphic nodes."""

    def test_compare_encoded_three_way(self):
        """Test compare_encoded behaves like a cmp function."""
        low = SECP256k1MintOutput(0, 1, (mk_address(1),))
        high = SECP256k1MintOutput(0, 1, (mk_address(2),))
        assert compare_encoded(low, high) < 0
        assert compare_encoded(high, low) > 0
        assert compare_encoded(low, SECP256k1MintOutput(0, 1, (mk_address(1),))) == 0

    def test_type_id_orders_before_content(self):
        """Test a lower type id sorts first regardless of field content."""
        transfer = SECP256k1TransferOutput(1, 0, 1, (mk_address(0x01),))
        mint = SECP256k1MintOutput(0xFFFFFFFF, 9, (mk_address(0xFF),))
        assert sort_encoded([transfer, mint]) == [mint, transfer]

    def test_mixed_family_sort(self):
        """Test outputs of both families sort by tag then content."""
        nft_mint = NFTMintOutput(0, 0, 1, (mk_address(3),))
        secp_transfer = SECP256k1TransferOutput(5, 0, 1, (mk_address(3),))
        secp_mint = SECP256k1MintOutput(0, 1, (mk_address(3),))
        ordered = sort_encoded([nft_mint, secp_transfer, secp_mint])
        assert [o.type_id for o in ordered] == [6, 7, 10]

    def test_sort_is_stable_for_equal_encodings(self):
        """Test sorting equal encodings keeps a consistent result."""
        a = SECP256k1MintOutput(0, 1, (mk_address(1),))
        b = SECP256k1MintOutput(0, 1, (mk_address(1),))
        assert [encode_node(o) for o in sort_encoded([a, b])] == [encode_node(a)] * 2

    def test_rich_comparison_operators(self):
        """Test model nodes compare with < and > by encoded bytes."""
        low = SECP256k1MintOutput(0, 1, (mk_address(1),))
        high = SECP256k1TransferOutput(0, 0, 1, (mk_address(1),))
        assert low < high
        assert high > low
        assert low <= low
        assert high >= low
