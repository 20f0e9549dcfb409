"""Window that shows the board and lets the pieces be dragged with the mouse."""

from __future__ import annotations

import argparse
from itertools import product
from typing import Optional, Sequence

from jeuechecs.game import ChessGame
from jeuechecs.pieces import BOARD_SIZE, Piece, Square

SQUARE_SIZE = 75
BOARD_PIXELS = SQUARE_SIZE * BOARD_SIZE
WINDOW_TITLE = "Projet jeu d'echec INF1015"
LIGHT_SQUARE = "#e3c16f"
DARK_SQUARE = "#b88b4a"

_SYMBOLS = {
    ("King", True): "\u2654",
    ("Queen", True): "\u2655",
    ("Rook", True): "\u2656",
    ("Bishop", True): "\u2657",
    ("Knight", True): "\u2658",
    ("Pawn", True): "\u2659",
    ("King", False): "\u265a",
    ("Queen", False): "\u265b",
    ("Rook", False): "\u265c",
    ("Bishop", False): "\u265d",
    ("Knight", False): "\u265e",
    ("Pawn", False): "\u265f",
}


def square_color(row: int, col: int) -> str:
    """Return the fill colour of a board square."""
    return LIGHT_SQUARE if (row + col) % 2 == 0 else DARK_SQUARE


def square_at(x: int, y: int) -> Square:
    """Return the (row, col) under a pixel, clamped to the board."""
    last = BOARD_SIZE - 1
    row = min(max(int(y / SQUARE_SIZE), 0), last)
    col = min(max(int(x / SQUARE_SIZE), 0), last)
    return row, col


def piece_symbol(piece: Piece) -> str:
    """Return the chess glyph that draws ``piece``."""
    return _SYMBOLS[(piece.name, piece.is_white)]


class ChessWindow:
    """Main window: a reset button, the board and the turn indicator."""

    def __init__(self, game: Optional[ChessGame] = None, master=None) -> None:
        import tkinter as tk

        self.game = game if game is not None else ChessGame()
        self.root = master if master is not None else tk.Tk()
        self.root.title(WINDOW_TITLE)
        tk.Button(self.root, text="Reset Board", command=self.on_reset).pack(pady=4)
        self.canvas = tk.Canvas(
            self.root, width=BOARD_PIXELS, height=BOARD_PIXELS, highlightthickness=0
        )
        self.canvas.pack()
        self.turn_label = tk.Label(self.root, text=self.game.turn_text())
        self.turn_label.pack(pady=4)
        self._items: dict[int, Square] = {}
        self._dragged: Optional[tuple[int, Square]] = None
        self.canvas.bind("<ButtonPress-1>", self._on_press)
        self.canvas.bind("<B1-Motion>", self._on_motion)
        self.canvas.bind("<ButtonRelease-1>", self._on_release)
        self.redraw()

    def redraw(self) -> None:
        """Draw the squares, the pieces and the turn text again."""
        self.canvas.delete("all")
        self._items.clear()
        for row, col in product(range(BOARD_SIZE), repeat=2):
            x0, y0 = col * SQUARE_SIZE, row * SQUARE_SIZE
            self.canvas.create_rectangle(
                x0, y0, x0 + SQUARE_SIZE, y0 + SQUARE_SIZE,
                fill=square_color(row, col), width=0,
            )
        for row, col in product(range(BOARD_SIZE), repeat=2):
            piece = self.game.piece_at(row, col)
            if piece is None:
                continue
            item = self.canvas.create_text(
                col * SQUARE_SIZE + SQUARE_SIZE // 2,
                row * SQUARE_SIZE + SQUARE_SIZE // 2,
                text=piece_symbol(piece),
                font=("DejaVu Sans", SQUARE_SIZE * 3 // 5),
            )
            self._items[item] = (row, col)
        self.turn_label.configure(text=self.game.turn_text())

    def on_reset(self) -> None:
        """Put the pieces back in the starting position."""
        self.game.reset()
        self._dragged = None
        self.redraw()

    def _on_press(self, event) -> None:
        source = square_at(event.x, event.y)
        for item, square in self._items.items():
            if square == source:
                self._dragged = (item, source)
                self.canvas.tag_raise(item)
                self.canvas.configure(cursor="fleur")
                return

    def _on_motion(self, event) -> None:
        if self._dragged is not None:
            self.canvas.coords(self._dragged[0], event.x, event.y)

    def _on_release(self, event) -> None:
        if self._dragged is None:
            return
        _, source = self._dragged
        self._dragged = None
        self.canvas.configure(cursor="")
        self.game.move(source, square_at(event.x, event.y))
        self.redraw()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Open the chess window and run until it is closed."""
    parser = argparse.ArgumentParser(prog="jeuechecs", description="Play chess on one board.")
    parser.parse_args(argv)
    window = ChessWindow()
    window.root.mainloop()
    return 0