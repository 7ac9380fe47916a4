"""Tests for game state representation."""

import pytest
from nim_solver.core import AI, HUMAN, GameState, opponent


def test_create_game_state():
    """Test basic game state creation."""
    state = GameState(piles=(3, 4, 5), player=AI)

    assert state.num_piles == 3
    assert state.piles == (3, 4, 5)
    assert state.player == AI
    assert state.total_objects == 12


def test_piles_converted_to_tuple():
    """Lists are stored as tuples so states stay hashable."""
    state = GameState(piles=[1, 2], player=HUMAN)

    assert state.piles == (1, 2)
    assert hash(state) == hash(GameState(piles=(1, 2), player=HUMAN))


def test_opponent():
    assert opponent(HUMAN) == AI
    assert opponent(AI) == HUMAN


def test_canonical_key_property():
    """Equivalent boards share a key, different movers do not."""
    a = GameState(piles=(5, 3, 4), player=AI)
    b = GameState(piles=(3, 4, 5), player=AI)
    c = GameState(piles=(3, 4, 5), player=HUMAN)

    assert a.canonical_key == b.canonical_key
    assert a.canonical_key != c.canonical_key


def test_board_string():
    """Board lists piles from 1."""
    text = str(GameState(piles=(2, 0), player=HUMAN))

    assert "Pile 1: 2" in text
    assert "Pile 2: 0" in text
    assert "You to move" in text


def test_state_validation():
    """Test state validation catches errors."""
    # Invalid player
    with pytest.raises(ValueError):
        GameState(piles=(1, 2), player=0)

    # Negative pile
    with pytest.raises(ValueError):
        GameState(piles=(1, -1), player=AI)


def test_empty_board_allowed():
    state = GameState(piles=(), player=AI)
    assert state.total_objects == 0
