"""Board state, turns and move rules of a chess game."""

from __future__ import annotations

from contextlib import contextmanager
from itertools import product
from typing import Iterator, Optional

from jeuechecs.pieces import BOARD_SIZE, King, Piece, Square, piece_class

_BACK_RANK = ("Rook", "Knight", "Bishop", "Queen", "King", "Bishop", "Knight", "Rook")
_MAX_KINGS = 2


class TooManyKingsError(Exception):
    """Raised when a king is added while both kings are already on the board."""

    def __init__(self) -> None:
        super().__init__("Erreur: trop de roi, il ne peut avoir plus d'un roi par côté")


class ChessGame:
    """An 8x8 chess board with the side to move.

    Row 0 holds the black pieces at the start, row 7 the white ones.
    """

    def __init__(self, empty: bool = False) -> None:
        self._board: dict[Square, Piece] = {}
        self._pieces: dict[bool, list[Piece]] = {True: [], False: []}
        self.is_white_turn = True
        if not empty:
            self.reset()

    def piece_at(self, row: int, col: int) -> Optional[Piece]:
        """Return the piece standing on (row, col), or None."""
        return self._board.get((row, col))

    def add_piece(self, name: str, position: Square, is_white: bool) -> Piece:
        """Place a new piece called ``name``, capturing whatever stood there."""
        position = tuple(position)
        if not Piece.on_board(*position):
            raise ValueError(f"square {position} is not on the board")
        cls = piece_class(name)
        occupant = self._board.get(position)
        if issubclass(cls, King):
            kings = sum(
                isinstance(piece, King)
                for piece in self._board.values()
                if piece is not occupant
            )
            if kings >= _MAX_KINGS:
                raise TooManyKingsError()
        if occupant is not None:
            self._take(occupant)
        piece = cls(position, is_white)
        self._board[position] = piece
        self._pieces[is_white].append(piece)
        return piece

    def remove_piece(self, position: Square) -> Optional[Piece]:
        """Take the piece off ``position`` and return it, or None if it was empty."""
        piece = self._board.get(tuple(position))
        if piece is not None:
            self._take(piece)
        return piece

    def pieces(self, is_white: bool) -> list[Piece]:
        """Return the pieces of one colour in the order they were added."""
        return list(self._pieces[is_white])

    def king(self, is_white: bool) -> Optional[King]:
        """Return the most recently added king of one colour, or None."""
        return next(
            (piece for piece in reversed(self._pieces[is_white]) if isinstance(piece, King)),
            None,
        )

    def attacked_squares(self, by_white: bool) -> set[Square]:
        """Return every square some piece of the given colour could move to."""
        return set().union(*(piece.calculate_moves(self) for piece in self._pieces[by_white]))

    def legal_targets(self, position: Square) -> list[Square]:
        """Return the squares the piece on ``position`` may move to without
        leaving its own king attacked."""
        piece = self._board.get(tuple(position))
        if piece is None:
            return []
        return [
            target
            for target in piece.calculate_moves(self)
            if not self._exposes_king(piece, target)
        ]

    def move(self, source: Square, target: Square) -> bool:
        """Play the piece on ``source`` to ``target``.

        Returns True if the move was made and the turn passed, False if the
        move was refused. Raises ValueError if ``source`` is empty.
        """
        source, target = tuple(source), tuple(target)
        piece = self._board.get(source)
        if piece is None:
            raise ValueError(f"no piece on square {source}")
        if piece.is_white != self.is_white_turn or target not in self.legal_targets(source):
            return False
        captured = self._board.get(target)
        if captured is not None:
            self._take(captured)
        del self._board[source]
        piece.position = target
        self._board[target] = piece
        piece.has_moved = True
        self.change_turn()
        return True

    def change_turn(self) -> None:
        """Give the move to the other side."""
        self.is_white_turn = not self.is_white_turn

    def clear(self) -> None:
        """Remove every piece from the board."""
        self._board.clear()
        for pieces in self._pieces.values():
            pieces.clear()

    def reset(self) -> None:
        """Set up the starting position with white to move."""
        self.clear()
        self.is_white_turn = True
        for row, col in product(range(BOARD_SIZE), repeat=2):
            if row == 6:
                self.add_piece("Pawn", (row, col), True)
            elif row == 1:
                self.add_piece("Pawn", (row, col), False)
            elif row in (0, 7):
                self.add_piece(_BACK_RANK[col], (row, col), row == 7)

    def turn_text(self) -> str:
        """Return the text that tells whose turn it is."""
        return "White turn" if self.is_white_turn else "Black turn"

    def _take(self, piece: Piece) -> None:
        del self._board[piece.position]
        self._pieces[piece.is_white].remove(piece)

    def _exposes_king(self, piece: Piece, target: Square) -> bool:
        with self._trial(piece, target):
            king = self.king(piece.is_white)
            return king is not None and king.position in self.attacked_squares(not piece.is_white)

    @contextmanager
    def _trial(self, piece: Piece, target: Square) -> Iterator[None]:
        source = piece.position
        captured = self._board.pop(target, None)
        index = None
        if captured is not None:
            owners = self._pieces[captured.is_white]
            index = owners.index(captured)
            del owners[index]
        del self._board[source]
        piece.position = target
        self._board[target] = piece
        try:
            yield
        finally:
            del self._board[target]
            piece.position = source
            self._board[source] = piece
            if captured is not None:
                self._board[target] = captured
                self._pieces[captured.is_white].insert(index, captured)