"""Tests for piece activity and territory statistics."""

from chesshue.core.enums import Color, PieceType
from chesshue.core.models import VisitBoard
from chesshue.core.piece import ALL_PIECE_CLASSES, PieceClass
from chesshue.core.types import file_of, parse_square, rank_of
from chesshue.notation.pgn import normalize_pgn, normalize_sans
from chesshue.visual.accumulator import accumulate
from chesshue.visual.stats import most_active, piece_activity, territory

WN = PieceClass(PieceType.KNIGHT, Color.WHITE)
WP = PieceClass(PieceType.PAWN, Color.WHITE)
BP = PieceClass(PieceType.PAWN, Color.BLACK)


class TestPieceActivity:
    def test_counts_every_class(self) -> None:
        activity = piece_activity(normalize_sans(["e4", "e5", "Nf3", "Nc6", "Nc3"]))
        assert set(activity) == set(ALL_PIECE_CLASSES)
        assert activity[WN] == 2
        assert activity[WP] == 1
        assert sum(activity.values()) == 5

    def test_most_active(self) -> None:
        activity = piece_activity(normalize_sans(["e4", "e5", "Nf3", "Nc6", "Nc3"]))
        assert most_active(activity) == WN

    def test_ties_follow_legend_order(self) -> None:
        activity = piece_activity(normalize_sans(["e4", "e5"]))
        # white pawn comes before black pawn in the legend
        assert most_active(activity) == WP

    def test_empty_game(self) -> None:
        assert most_active(piece_activity([])) is None

    def test_castling_counts_as_king(self, opera_pgn: str) -> None:
        activity = piece_activity(normalize_pgn(opera_pgn))
        assert activity[PieceClass(PieceType.KING, Color.WHITE)] == 1


class TestTerritory:
    def test_empty_board_is_even(self) -> None:
        result = territory(VisitBoard.empty())
        assert (result.white_percent, result.black_percent) == (50, 50)

    def test_percentages_sum_to_hundred(self) -> None:
        result = territory(accumulate(normalize_sans(["e4", "e5", "Nf3"])))
        assert result.white_percent == 67
        assert result.black_percent == 33

    def test_grid_positions(self) -> None:
        result = territory(accumulate(normalize_sans(["e4", "e5"])))
        e4, e5 = parse_square("e4"), parse_square("e5")
        assert result.grid(Color.WHITE)[rank_of(e4)][file_of(e4)] == 1
        assert result.grid(Color.BLACK)[rank_of(e5)][file_of(e5)] == 1
        assert result.grid(Color.WHITE)[rank_of(e5)][file_of(e5)] == 0
        assert sum(map(sum, result.black)) == 1
