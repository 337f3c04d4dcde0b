"""Game layer: sequencing moves into playable position lists."""

from chessplay.game.replay import ReplayResult, replay_game, replay_pgn, replay_record
from chessplay.game.sequencer import PositionSequence, generate_positions

__all__ = [
    "PositionSequence",
    "ReplayResult",
    "generate_positions",
    "replay_game",
    "replay_pgn",
    "replay_record",
]
