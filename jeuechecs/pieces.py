"""Chess pieces and the squares each of them can reach."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Iterable, Iterator, Optional, Protocol

BOARD_SIZE = 8

Square = tuple[int, int]


class Board(Protocol):
    """Anything that can tell which piece stands on a square."""

    def piece_at(self, row: int, col: int) -> Optional["Piece"]:
        ...


_ORTHOGONAL: tuple[Square, ...] = ((1, 0), (-1, 0), (0, 1), (0, -1))
_DIAGONAL: tuple[Square, ...] = ((1, 1), (1, -1), (-1, 1), (-1, -1))


@dataclass(eq=False)
class Piece:
    """A piece of one colour standing on a square given as (row, col).

    Row 0 is the black side of the board, row 7 the white side.
    """

    position: Square
    is_white: bool
    has_moved: bool = False

    name: ClassVar[str] = "Piece"

    def calculate_moves(self, board: Board) -> list[Square]:
        """Return the squares this piece may move to on ``board``."""
        return []

    @staticmethod
    def on_board(row: int, col: int) -> bool:
        """Tell whether (row, col) lies on the 8x8 board."""
        return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE

    def _is_enemy(self, other: Optional["Piece"]) -> bool:
        return other is not None and other.is_white != self.is_white

    def _steps(self, board: Board, offsets: Iterable[Square]) -> Iterator[Square]:
        row, col = self.position
        for d_row, d_col in offsets:
            target = (row + d_row, col + d_col)
            if not self.on_board(*target):
                continue
            other = board.piece_at(*target)
            if other is None or self._is_enemy(other):
                yield target

    def _slides(self, board: Board, directions: Iterable[Square]) -> Iterator[Square]:
        row, col = self.position
        for d_row, d_col in directions:
            for distance in range(1, BOARD_SIZE):
                target = (row + d_row * distance, col + d_col * distance)
                if not self.on_board(*target):
                    break
                other = board.piece_at(*target)
                if other is None or self._is_enemy(other):
                    yield target
                if other is not None:
                    break


class Pawn(Piece):
    """A pawn; white moves towards row 0, black towards row 7."""

    name: ClassVar[str] = "Pawn"

    def calculate_moves(self, board: Board) -> list[Square]:
        row, col = self.position
        step = -1 if self.is_white else 1
        ahead = row + step
        moves: list[Square] = []
        if self.on_board(ahead, col) and board.piece_at(ahead, col) is None:
            moves.append((ahead, col))
        for side in (col - 1, col + 1):
            if self.on_board(ahead, side) and self._is_enemy(board.piece_at(ahead, side)):
                moves.append((ahead, side))
        if not self.has_moved:
            double = row + 2 * step
            if self.on_board(double, col) and board.piece_at(double, col) is None:
                moves.append((double, col))
        return moves


class Knight(Piece):
    """A knight, jumping in an L shape."""

    name: ClassVar[str] = "Knight"

    _OFFSETS: ClassVar[tuple[Square, ...]] = (
        (2, 1), (2, -1), (-2, 1), (-2, -1), (1, 2), (1, -2), (-1, 2), (-1, -2),
    )

    def calculate_moves(self, board: Board) -> list[Square]:
        return list(self._steps(board, self._OFFSETS))


class Bishop(Piece):
    """A bishop, sliding along diagonals."""

    name: ClassVar[str] = "Bishop"

    def calculate_moves(self, board: Board) -> list[Square]:
        return list(self._slides(board, _DIAGONAL))


class Rook(Piece):
    """A rook, sliding along rows and columns."""

    name: ClassVar[str] = "Rook"

    def calculate_moves(self, board: Board) -> list[Square]:
        return list(self._slides(board, _ORTHOGONAL))


class Queen(Piece):
    """A queen, sliding along rows, columns and diagonals."""

    name: ClassVar[str] = "Queen"

    def calculate_moves(self, board: Board) -> list[Square]:
        return list(self._slides(board, _ORTHOGONAL + _DIAGONAL))


class King(Piece):
    """A king, stepping one square in any direction."""

    name: ClassVar[str] = "King"

    def calculate_moves(self, board: Board) -> list[Square]:
        return list(self._steps(board, _ORTHOGONAL + _DIAGONAL))


_BY_NAME: dict[str, type[Piece]] = {
    cls.name: cls for cls in (Pawn, Rook, Knight, Bishop, Queen, King)
}


def piece_class(name: str) -> type[Piece]:
    """Return the piece class called ``name``; any other name gives King."""
    return _BY_NAME.get(name, King)