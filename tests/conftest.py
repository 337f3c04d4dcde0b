"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import pytest

from chessplay.core.notation import decode_board
from chessplay.core.position import Position


@pytest.fixture
def start() -> Position:
    """Standard starting position."""
    return Position.initial()


@pytest.fixture
def kings_only() -> Position:
    """White king e1, black king e8, nothing else."""
    return decode_board("4k3/8/8/8/8/8/8/4K3")


@pytest.fixture
def castling_ready() -> Position:
    """Both kings and all four rooks on their home squares."""
    return decode_board("r3k2r/8/8/8/8/8/8/R3K2R")
