from .factories import (
    ASSET_ID,
    BLOCKCHAIN_ID,
    TX_ID,
    key_address,
    mk_address,
    mk_base_tx,
    mk_base_tx_description,
    mk_input,
    mk_input_description,
    mk_output_description,
    mk_private_key,
    mk_transfer_output,
)

__all__ = [
    "ASSET_ID",
    "BLOCKCHAIN_ID",
    "TX_ID",
    "key_address",
    "mk_address",
    "mk_base_tx",
    "mk_base_tx_description",
    "mk_input",
    "mk_input_description",
    "mk_output_description",
    "mk_private_key",
    "mk_transfer_output",
]
