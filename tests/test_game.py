import pytest

from jeuechecs.game import ChessGame, TooManyKingsError
from jeuechecs.pieces import King

BACK_RANK = ["Rook", "Knight", "Bishop", "Queen", "King", "Bishop", "Knight", "Rook"]


def test_back_ranks_of_starting_position():
    game = ChessGame()
    assert [game.piece_at(7, c).name for c in range(8)] == BACK_RANK
    assert [game.piece_at(0, c).name for c in range(8)] == BACK_RANK
    assert all(game.piece_at(7, c).is_white for c in range(8))
    assert not any(game.piece_at(0, c).is_white for c in range(8))


def test_pawns_and_empty_middle():
    game = ChessGame()
    for c in range(8):
        assert game.piece_at(6, c).name == "Pawn" and game.piece_at(6, c).is_white
        assert game.piece_at(1, c).name == "Pawn" and not game.piece_at(1, c).is_white
    assert all(game.piece_at(r, c) is None for r in range(2, 6) for c in range(8))


def test_pieces_lists_match_board():
    game = ChessGame()
    for is_white in (True, False):
        for piece in game.pieces(is_white):
            assert game.piece_at(*piece.position) is piece
            assert piece.is_white == is_white


def test_kings_start_on_column_four():
    game = ChessGame()
    assert game.king(True).position == (7, 4)
    assert game.king(False).position == (0, 4)


def test_turn_text_alternates():
    game = ChessGame()
    assert game.turn_text() == "White turn"
    game.change_turn()
    assert game.turn_text() == "Black turn"
    game.change_turn()
    assert game.turn_text() == "White turn"


def test_pawn_double_step_moves_and_passes_turn():
    game = ChessGame()
    pawn = game.piece_at(6, 4)
    assert game.move((6, 4), (4, 4)) is True
    assert game.piece_at(4, 4) is pawn
    assert game.piece_at(6, 4) is None
    assert pawn.position == (4, 4)
    assert pawn.has_moved
    assert game.turn_text() == "Black turn"


def test_wrong_side_cannot_move():
    game = ChessGame()
    assert game.move((1, 0), (2, 0)) is False
    assert game.piece_at(1, 0).name == "Pawn"
    assert game.piece_at(2, 0) is None
    assert game.is_white_turn


def test_blocked_rook_cannot_move():
    game = ChessGame()
    assert game.move((7, 0), (5, 0)) is False
    assert game.piece_at(7, 0).name == "Rook"


def test_moving_from_empty_square_raises():
    game = ChessGame()
    with pytest.raises(ValueError):
        game.move((4, 4), (3, 4))


def test_capture_removes_piece_from_its_side():
    game = ChessGame(empty=True)
    game.add_piece("King", (7, 7), True)
    game.add_piece("King", (0, 7), False)
    rook = game.add_piece("Rook", (4, 0), True)
    knight = game.add_piece("Knight", (4, 5), False)
    assert game.move((4, 0), (4, 5)) is True
    assert game.piece_at(4, 5) is rook
    assert knight not in game.pieces(False)


def test_king_cannot_step_into_attack():
    game = ChessGame(empty=True)
    game.add_piece("King", (7, 4), True)
    game.add_piece("King", (0, 0), False)
    game.add_piece("Rook", (0, 5), False)
    targets = game.legal_targets((7, 4))
    assert (7, 5) not in targets
    assert (6, 5) not in targets
    assert game.move((7, 4), (7, 5)) is False
    assert game.is_white_turn
    assert game.move((7, 4), (7, 3)) is True
    assert game.king(True).position == (7, 3)


def test_pinned_rook_keeps_board_unchanged_when_refused():
    game = ChessGame(empty=True)
    game.add_piece("King", (7, 4), True)
    rook = game.add_piece("Rook", (6, 4), True)
    game.add_piece("Rook", (2, 4), False)
    knight = game.add_piece("Knight", (6, 7), False)
    game.add_piece("King", (0, 0), False)
    assert (6, 7) in rook.calculate_moves(game)
    assert game.move((6, 4), (6, 7)) is False
    assert game.piece_at(6, 7) is knight
    assert knight in game.pieces(False)
    assert game.piece_at(6, 4) is rook
    assert not rook.has_moved
    assert game.move((6, 4), (3, 4)) is True
    assert game.piece_at(3, 4) is rook


def test_legal_targets_subset_of_piece_moves():
    game = ChessGame()
    for piece in game.pieces(True):
        assert set(game.legal_targets(piece.position)) <= set(piece.calculate_moves(game))


def test_knight_targets_at_start():
    game = ChessGame()
    assert set(game.legal_targets((7, 6))) == {(5, 5), (5, 7)}


def test_legal_targets_of_empty_square():
    assert ChessGame().legal_targets((4, 4)) == []


def test_third_king_is_refused():
    game = ChessGame(empty=True)
    game.add_piece("King", (7, 4), True)
    game.add_piece("King", (0, 4), False)
    with pytest.raises(TooManyKingsError) as info:
        game.add_piece("King", (3, 3), True)
    assert str(info.value) == "Erreur: trop de roi, il ne peut avoir plus d'un roi par côté"
    assert game.piece_at(3, 3) is None


def test_king_may_replace_a_king():
    game = ChessGame(empty=True)
    game.add_piece("King", (7, 4), True)
    game.add_piece("King", (0, 4), False)
    new_king = game.add_piece("King", (0, 4), True)
    assert game.piece_at(0, 4) is new_king
    assert game.king(False) is None
    assert game.king(True) is new_king


def test_unknown_name_adds_a_king():
    game = ChessGame(empty=True)
    piece = game.add_piece("Dragon", (3, 3), True)
    assert isinstance(piece, King)
    assert piece.name == "King"
    assert piece.position == (3, 3)
    assert piece.is_white
    assert game.piece_at(3, 3) is piece
    assert game.king(True) is piece


def test_add_piece_off_board_raises():
    game = ChessGame(empty=True)
    with pytest.raises(ValueError):
        game.add_piece("Rook", (8, 0), True)


def test_remove_piece():
    game = ChessGame()
    queen = game.piece_at(7, 3)
    assert game.remove_piece((7, 3)) is queen
    assert game.piece_at(7, 3) is None
    assert queen not in game.pieces(True)
    assert game.remove_piece((4, 4)) is None


def test_attacked_squares_include_every_piece_move():
    game = ChessGame()
    attacked = game.attacked_squares(False)
    for piece in game.pieces(False):
        assert set(piece.calculate_moves(game)) <= attacked


def test_reset_restores_start():
    game = ChessGame()
    game.move((6, 4), (4, 4))
    game.remove_piece((0, 0))
    game.reset()
    assert game.is_white_turn
    assert game.piece_at(4, 4) is None
    assert game.piece_at(6, 4).name == "Pawn"
    assert [game.piece_at(0, c).name for c in range(8)] == BACK_RANK


def test_clear_empties_board():
    game = ChessGame()
    game.clear()
    assert game.pieces(True) == [] and game.pieces(False) == []
    assert game.piece_at(7, 4) is None
    assert game.king(True) is None