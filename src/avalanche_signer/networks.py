"""
Network parameter presets.

Bundles the network id and bech32 human-readable prefix of the public
Avalanche networks so callers can build descriptions and render addresses
without repeating magic numbers.
"""

from __future__ import annotations
from typing import Dict, Union
from dataclasses import dataclass

from .constants import AVAX_HRP


@dataclass(frozen=True)
class NetworkParams:
    """Network id and address prefix of one network."""

    name: str
    network_id: int
    hrp: str


MAINNET = NetworkParams(name="mainnet", network_id=1, hrp=AVAX_HRP)
FUJI = NetworkParams(name="fuji", network_id=5, hrp="fuji")
LOCAL = NetworkParams(name="local", network_id=12345, hrp="local")

_NETWORKS: Dict[str, NetworkParams] = {
    params.name: params for params in (MAINNET, FUJI, LOCAL)
}


def get_network(name_or_id: Union[str, int] = "mainnet") -> NetworkParams:
    """
    Look up network parameters.

    Args:
        name_or_id: Network name ("mainnet", "fuji", "local") or numeric network id

    Returns:
        Network parameters

    Raises:
        KeyError: If no preset matches
    """
    if isinstance(name_or_id, int):
        for params in _NETWORKS.values():
            if params.network_id == name_or_id:
                return params
        raise KeyError(f"Unknown network id: {name_or_id}")
    try:
        return _NETWORKS[name_or_id.lower()]
    except KeyError:
        raise KeyError(f"Unknown network: {name_or_id}") from None


__all__ = ["NetworkParams", "MAINNET", "FUJI", "LOCAL", "get_network"]
