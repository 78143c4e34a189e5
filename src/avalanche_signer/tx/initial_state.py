"""
Initial states minted by an asset creation transaction.

The owned outputs are always held in ascending order of their encoded
bytes. Every path that changes or copies the outputs restores that order,
so two states built from the same outputs in any order are equal and
encode identically.
"""

from __future__ import annotations
from typing import Any, Iterable, List, Tuple

from ..codec.encoder import encoded_key, sort_encoded
from ..codec.writer import BinaryWriter
from ..constants import FeatureExtension
from .fields import EncodedOrdering, write_nodes
from .outputs import TransactionOutput


class InitialState(EncodedOrdering):
    """Outputs of one feature extension, kept sorted by encoded bytes."""

    def __init__(self, fx_id: FeatureExtension, outputs: Iterable[TransactionOutput] = ()):
        """
        Initialize initial state.

        Args:
            fx_id: Feature extension the outputs belong to
            outputs: Outputs in any order
        """
        self.fx_id = FeatureExtension(fx_id)
        self._outputs: List[TransactionOutput] = []
        self.outputs = outputs

    @property
    def outputs(self) -> Tuple[TransactionOutput, ...]:
        return tuple(self._outputs)

    @outputs.setter
    def outputs(self, outputs: Iterable[TransactionOutput]) -> None:
        self._outputs = sort_encoded(outputs)

    def add_output(self, output: TransactionOutput) -> None:
        """Add an output and restore the encoded-byte order."""
        self._outputs = sort_encoded(self._outputs + [output])

    def with_outputs(self, outputs: Iterable[TransactionOutput]) -> InitialState:
        """Return a new state of the same fx holding the given outputs."""
        return InitialState(self.fx_id, outputs)

    def copy(self) -> InitialState:
        return InitialState(self.fx_id, self._outputs)

    def encode(self, writer: BinaryWriter) -> None:
        writer.u32be(self.fx_id)
        write_nodes(writer, self._outputs)

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, InitialState):
            return encoded_key(self) == encoded_key(other)
        return NotImplemented

    __hash__ = None

    def __repr__(self) -> str:
        return f"InitialState(fx_id={self.fx_id.name}, outputs={list(self._outputs)!r})"


__all__ = ["InitialState"]
