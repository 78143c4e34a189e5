"""
InitialState ordering tests.

Outputs must stay sorted by their encoded bytes after construction,
assignment, insertion and copying.
"""

import itertools

from avalanche_signer.codec import encode_node
from avalanche_signer.constants import FeatureExtension
from avalanche_signer.tx import (
    InitialState,
    NFTMintOutput,
    NFTTransferOutput,
    SECP256k1MintOutput,
    SECP256k1TransferOutput,
)

from helpers.factories import mk_address


def _is_sorted(state):
    encodings = [encode_node(o) for o in state.outputs]
    return encodings == sorted(encodings)


class TestInitialStateOrder:
    """Test the sorted-outputs invariant."""

    def test_mint_before_transfer(self):
        """Test a mint output (type 6) sorts before a transfer output (type 7)."""
        transfer = SECP256k1TransferOutput(100, 0, 1, (mk_address(1),))
        mint = SECP256k1MintOutput(0, 1, (mk_address(1),))
        state = InitialState(FeatureExtension.SECP256K1, [transfer, mint])
        assert state.outputs == (mint, transfer)

    def test_nft_mint_before_transfer_same_group(self):
        """Test NFT mint (type 10) sorts before NFT transfer (type 11)."""
        transfer = NFTTransferOutput(0, b"", 0, 1, (mk_address(1),))
        mint = NFTMintOutput(0, 0, 1, (mk_address(1),))
        state = InitialState(FeatureExtension.NFT, [transfer, mint])
        assert state.outputs == (mint, transfer)

    def test_same_type_orders_by_content(self):
        """Test equal tags fall through to field bytes."""
        big = SECP256k1TransferOutput(500, 0, 1, (mk_address(1),))
        small = SECP256k1TransferOutput(20, 0, 1, (mk_address(9),))
        state = InitialState(FeatureExtension.SECP256K1, [big, small])
        assert state.outputs == (small, big)

    def test_every_permutation_encodes_identically(self):
        """Test input order never changes the encoding."""
        outputs = [
            SECP256k1TransferOutput(1, 0, 1, (mk_address(3),)),
            SECP256k1MintOutput(0, 1, (mk_address(2),)),
            SECP256k1TransferOutput(1, 0, 1, (mk_address(2),)),
        ]
        encodings = {
            encode_node(InitialState(FeatureExtension.SECP256K1, perm))
            for perm in itertools.permutations(outputs)
        }
        assert len(encodings) == 1

    def test_assignment_resorts(self):
        """Test assigning outputs restores order."""
        state = InitialState(FeatureExtension.SECP256K1)
        state.outputs = [
            SECP256k1TransferOutput(1, 0, 1, ()),
            SECP256k1MintOutput(0, 1, ()),
        ]
        assert _is_sorted(state)

    def test_add_output_resorts(self):
        """Test insertion keeps the order."""
        state = InitialState(FeatureExtension.SECP256K1, [SECP256k1TransferOutput(1, 0, 1, ())])
        state.add_output(SECP256k1MintOutput(0, 1, ()))
        assert [o.type_id for o in state.outputs] == [6, 7]
        assert _is_sorted(state)

    def test_copy_and_with_outputs_sorted(self):
        """Test derived states keep the invariant."""
        state = InitialState(FeatureExtension.SECP256K1, [SECP256k1MintOutput(0, 1, ())])
        copied = state.copy()
        assert copied == state
        assert copied is not state
        derived = state.with_outputs([SECP256k1TransferOutput(1, 0, 1, ()), SECP256k1MintOutput(0, 1, ())])
        assert derived.fx_id == FeatureExtension.SECP256K1
        assert _is_sorted(derived)

    def test_copy_is_independent(self):
        """Test adding to a copy leaves the original untouched."""
        state = InitialState(FeatureExtension.SECP256K1, [SECP256k1MintOutput(0, 1, ())])
        copied = state.copy()
        copied.add_output(SECP256k1TransferOutput(1, 0, 1, ()))
        assert len(state.outputs) == 1
        assert len(copied.outputs) == 2


class TestInitialStateEncoding:
    """Test the wire form of an initial state."""

    def test_layout(self):
        """Test fx id, output count, outputs."""
        mint = SECP256k1MintOutput(0, 1, ())
        state = InitialState(FeatureExtension.NFT, [])
        assert encode_node(state).hex() == "00000001" "00000000"
        state = InitialState(FeatureExtension.SECP256K1, [mint])
        assert encode_node(state) == b"\x00\x00\x00\x00" b"\x00\x00\x00\x01" + encode_node(mint)

    def test_states_order_by_fx(self):
        """Test states compare by encoding, so the lower fx id sorts first."""
        secp = InitialState(FeatureExtension.SECP256K1, [SECP256k1MintOutput(0, 1, ())])
        nft = InitialState(FeatureExtension.NFT, [NFTMintOutput(0, 0, 1, ())])
        assert sorted([nft, secp]) == [secp, nft]
