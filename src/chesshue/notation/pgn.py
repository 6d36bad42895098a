"""Move stream normalization on top of the python-chess rules engine.

python-chess parses and validates the PGN; this module only reads back
what the engine reports for each mainline ply and turns it into ordered,
1-indexed :class:`MoveDescriptor` records.
"""

from __future__ import annotations

import io
import logging
from collections.abc import Iterable

import chess
import chess.pgn

from chesshue.core.enums import CastleSide, Color, PieceType
from chesshue.core.models import GameInfo, MoveDescriptor
from chesshue.core.piece import PieceClass
from chesshue.core.types import Square, make_square, rank_of

_LOGGER = logging.getLogger(__name__)


class PgnImportError(ValueError):
    """Raised when the rules engine cannot replay a PGN / SAN list."""


def _piece_type(chess_piece_type: int) -> PieceType:
    return PieceType(chess.piece_symbol(chess_piece_type))


def _describe(
    board: chess.Board, move: chess.Move, move_number: int
) -> MoveDescriptor:
    """Read the engine's view of *move* before it is pushed on *board*."""
    piece = board.piece_at(move.from_square)
    if piece is None:
        raise PgnImportError(f"No piece on {chess.square_name(move.from_square)}")

    san = board.san(move)
    color = Color.WHITE if piece.color == chess.WHITE else Color.BLACK
    target = move.to_square
    castle: CastleSide | None = None
    rook_target: int | None = None

    if board.is_castling(move):
        rank = rank_of(move.from_square)
        if board.is_kingside_castling(move):
            castle = CastleSide.KINGSIDE
            target, rook_target = make_square(6, rank), make_square(5, rank)
        else:
            castle = CastleSide.QUEENSIDE
            target, rook_target = make_square(2, rank), make_square(3, rank)

    return MoveDescriptor(
        move_number=move_number,
        san=san,
        piece_type=_piece_type(piece.piece_type),
        color=color,
        from_square=move.from_square,
        target_square=target,
        is_capture=board.is_capture(move),
        castle=castle,
        rook_target=rook_target,
        promotion=_piece_type(move.promotion) if move.promotion else None,
        uci=move.uci(),
    )


def _replay(board: chess.Board, moves: Iterable[chess.Move]) -> list[MoveDescriptor]:
    descriptors: list[MoveDescriptor] = []
    for ply, move in enumerate(moves, start=1):
        descriptors.append(_describe(board, move, ply))
        board.push(move)
    return descriptors


def read_game(pgn_text: str) -> tuple[GameInfo, list[MoveDescriptor]]:
    """Parse a single PGN game; raise :class:`PgnImportError` on failure."""
    game = chess.pgn.read_game(io.StringIO(pgn_text))
    if game is None:
        raise PgnImportError("PGN text contains no game")
    if game.errors:
        raise PgnImportError(f"Invalid PGN: {game.errors[0]}")

    start = game.board()
    descriptors = _replay(start.copy(), game.mainline_moves())
    headers = game.headers
    info = GameInfo(
        white=headers.get("White", "?"),
        black=headers.get("Black", "?"),
        event=headers.get("Event", "?"),
        date=headers.get("Date", "?"),
        result=headers.get("Result", "*"),
        start_fen=start.fen(),
        sans=tuple(d.san for d in descriptors),
    )
    _LOGGER.debug(
        "Read PGN game %s vs %s, %d plies", info.white, info.black, len(descriptors)
    )
    return info, descriptors


def normalize_pgn(pgn_text: str) -> list[MoveDescriptor]:
    """Descriptors for the PGN mainline, or ``[]`` if it cannot be replayed."""
    try:
        _info, descriptors = read_game(pgn_text)
    except PgnImportError as exc:
        _LOGGER.warning("Falling back to an empty move list: %s", exc)
        return []
    return descriptors


def normalize_sans(
    sans: Iterable[str], fen: str = chess.STARTING_FEN
) -> list[MoveDescriptor]:
    """Replay a bare SAN list from *fen*; ``[]`` if any move is rejected."""
    try:
        board = chess.Board(fen)
        moves: list[chess.Move] = []
        for san in sans:
            move = board.parse_san(san)
            moves.append(move)
            board.push(move)
    except ValueError as exc:
        _LOGGER.warning("Falling back to an empty move list: %s", exc)
        return []

    return _replay(chess.Board(fen), moves)


def occupancy_by_ply(
    moves: Iterable[MoveDescriptor], fen: str = chess.STARTING_FEN
) -> list[dict[Square, PieceClass]]:
    """Occupied squares before the first ply and after every ply.

    Entry ``n`` is the position after ply ``n``; entry 0 is *fen* itself.
    The descriptors must come from this module (they carry their UCI
    text). Raises :class:`PgnImportError` if the engine rejects a move.
    """
    board = chess.Board(fen)
    positions = [_occupancy(board)]
    try:
        for move in moves:
            board.push_uci(move.uci)
            positions.append(_occupancy(board))
    except ValueError as exc:
        raise PgnImportError(f"Cannot replay move: {exc}") from exc
    return positions


def position_after(
    moves: Iterable[MoveDescriptor], fen: str = chess.STARTING_FEN
) -> dict[Square, PieceClass]:
    """Occupied squares after replaying *moves* from *fen*."""
    return occupancy_by_ply(moves, fen)[-1]


def _occupancy(board: chess.Board) -> dict[Square, PieceClass]:
    return {
        square: PieceClass(
            _piece_type(piece.piece_type),
            Color.WHITE if piece.color == chess.WHITE else Color.BLACK,
        )
        for square, piece in board.piece_map().items()
    }
