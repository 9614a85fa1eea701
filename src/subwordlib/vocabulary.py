## subwordlib/src/subwordlib/vocabulary.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

UNK_TOKEN = "<unk>"
UNK_PROBABILITY = 0.001


@dataclass(frozen=True)
class Subword:
    """A single vocabulary entry: a literal piece of text with its ID and weight."""

    id: int
    piece: str
    probability: float = 0.0

    def __post_init__(self):
        if not self.piece:
            raise ValueError(f"Subword {self.id} has an empty piece")


class Vocabulary:
    """
    Ordered, read-only collection of subwords.

    All lookup tables are built once here, so the tokenizer never rebuilds
    them per call:
      - piece_to_id : piece -> id, the LAST entry with a given text wins
      - id_to_piece : id -> piece
      - unk_id      : id registered for "<unk>" (None if absent)
      - match index : piece -> id of the FIRST entry with that text, and the
                      distinct piece lengths (longest first) for prefix search
    """

    def __init__(self, subwords: Iterable[Subword]):
        self._subwords: Tuple[Subword, ...] = tuple(subwords)

        self.id_to_piece: Dict[int, str] = {}
        self.piece_to_id: Dict[str, int] = {}
        self._first_id: Dict[str, int] = {}

        for sw in self._subwords:
            if sw.id in self.id_to_piece:
                raise ValueError(f"Duplicate subword id: {sw.id}")
            self.id_to_piece[sw.id] = sw.piece
            self.piece_to_id[sw.piece] = sw.id
            self._first_id.setdefault(sw.piece, sw.id)

        self.unk_id: Optional[int] = self.piece_to_id.get(UNK_TOKEN)
        self._lengths: Tuple[int, ...] = tuple(
            sorted({len(p) for p in self._first_id}, reverse=True)
        )

    @classmethod
    def from_pieces(cls, pieces: Iterable[Tuple[str, float]]) -> "Vocabulary":
        """Build a vocabulary from (piece, probability) pairs, ids = positions."""
        return cls(
            Subword(id=i, piece=piece, probability=prob)
            for i, (piece, prob) in enumerate(pieces)
        )

    # -------- sequence protocol --------

    def __len__(self) -> int:
        return len(self._subwords)

    def __iter__(self) -> Iterator[Subword]:
        return iter(self._subwords)

    def __getitem__(self, index: int) -> Subword:
        return self._subwords[index]

    def __contains__(self, piece: object) -> bool:
        return piece in self.piece_to_id

    def __repr__(self) -> str:
        return f"Vocabulary(size={len(self)}, unk_id={self.unk_id})"

    # -------- lookups --------

    def longest_prefix(self, text: str, start: int = 0) -> Optional[Tuple[int, int]]:
        """
        Return (id, length) of the longest piece that is a prefix of text[start:].

        Among pieces of the same (maximal) length the first one in vocabulary
        order wins, i.e. the same answer a full scan in order would give.
        """
        remaining = len(text) - start
        for length in self._lengths:
            if length > remaining:
                continue
            sid = self._first_id.get(text[start:start + length])
            if sid is not None:
                return sid, length
        return None

    def pieces(self) -> List[str]:
        return [sw.piece for sw in self._subwords]

    def to_dict(self) -> Dict[str, int]:
        return dict(self.piece_to_id)
