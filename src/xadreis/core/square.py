"""Square value object: what sits on one cell of the board."""

from __future__ import annotations

from dataclasses import dataclass

from xadreis.core.enums import Owner, PieceKind
from xadreis.core.errors import InvariantViolation

# FEN character ↔ (Owner, PieceKind)
_CHAR_MAP: dict[str, tuple[Owner, PieceKind]] = {
    "P": (Owner.WHITE, PieceKind.PAWN),
    "N": (Owner.WHITE, PieceKind.KNIGHT),
    "B": (Owner.WHITE, PieceKind.BISHOP),
    "R": (Owner.WHITE, PieceKind.ROOK),
    "Q": (Owner.WHITE, PieceKind.QUEEN),
    "K": (Owner.WHITE, PieceKind.KING),
    "p": (Owner.BLACK, PieceKind.PAWN),
    "n": (Owner.BLACK, PieceKind.KNIGHT),
    "b": (Owner.BLACK, PieceKind.BISHOP),
    "r": (Owner.BLACK, PieceKind.ROOK),
    "q": (Owner.BLACK, PieceKind.QUEEN),
    "k": (Owner.BLACK, PieceKind.KING),
}

_FEN_CHARS: dict[tuple[Owner, PieceKind], str] = {v: k for k, v in _CHAR_MAP.items()}


@dataclass(frozen=True, slots=True)
class Square:
    """Immutable (kind, owner) pair. Both are NONE exactly when empty."""

    kind: PieceKind = PieceKind.NONE
    owner: Owner = Owner.NONE

    def __post_init__(self) -> None:
        if not isinstance(self.kind, PieceKind) or not isinstance(self.owner, Owner):
            raise InvariantViolation(
                f"Square needs PieceKind/Owner, got {self.kind!r}/{self.owner!r}"
            )
        if (self.kind == PieceKind.NONE) != (self.owner == Owner.NONE):
            raise InvariantViolation(
                f"Square mixes empty and occupied state: {self.kind!r}/{self.owner!r}"
            )

    @property
    def is_empty(self) -> bool:
        return self.owner == Owner.NONE

    # ── Serialisation ────────────────────────────────────────────────────

    def __str__(self) -> str:
        """Board-dump symbol (uppercase = white, lowercase = black, '.' = empty)."""
        if self.is_empty:
            return "."
        return _FEN_CHARS[(self.owner, self.kind)]

    @classmethod
    def from_char(cls, char: str) -> Square:
        """Create an occupied square from a FEN letter, e.g. 'N' → white knight."""
        try:
            owner, kind = _CHAR_MAP[char]
        except KeyError:
            raise ValueError(f"Invalid piece character: {char!r}") from None
        return cls(kind, owner)


EMPTY = Square()
