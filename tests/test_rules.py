"""Tests for game rules."""

import pytest
from nim_solver.core import (
    AI,
    HUMAN,
    GameState,
    IllegalMoveError,
    apply_move,
    create_starting_state,
    generate_moves,
    get_winner,
    is_terminal,
    nim_sum,
    terminal_score,
)


def test_create_starting_state():
    """Test starting state creation."""
    state = create_starting_state([3, 4, 5])

    assert state.piles == (3, 4, 5)
    assert state.player == HUMAN

    state = create_starting_state([1], first_player=AI)
    assert state.player == AI


def test_generate_moves_order():
    """Moves go by pile index, then by amount."""
    state = GameState(piles=(2, 0, 1), player=AI)

    moves = generate_moves(state)

    assert [(m.pile_index, m.amount) for m in moves] == [(0, 1), (0, 2), (2, 1)]
    assert [m.child.piles for m in moves] == [(1, 0, 1), (0, 0, 1), (2, 0, 0)]


def test_generate_moves_flips_player():
    for player in (HUMAN, AI):
        state = GameState(piles=(3,), player=player)
        assert all(m.child.player != player for m in generate_moves(state))


def test_generate_moves_count():
    """One move per object in every pile."""
    state = GameState(piles=(3, 4, 5), player=AI)
    assert len(generate_moves(state)) == 12


def test_generate_moves_terminal():
    assert generate_moves(GameState(piles=(0, 0), player=AI)) == []
    assert generate_moves(GameState(piles=(), player=HUMAN)) == []


def test_generate_moves_leaves_parent_unchanged():
    state = GameState(piles=(2, 2), player=AI)
    generate_moves(state)
    assert state.piles == (2, 2)


def test_apply_move():
    """Test basic move."""
    state = create_starting_state([3, 4, 5], first_player=HUMAN)

    next_state = apply_move(state, 1, 4)

    assert next_state.piles == (3, 0, 5)
    assert next_state.player == AI


@pytest.mark.parametrize(
    "pile_index,amount",
    [
        (-1, 1),  # Below range
        (3, 1),  # Past the last pile
        (0, 0),  # Must take something
        (0, 4),  # More than the pile holds
        (1, 1),  # Empty pile
    ],
)
def test_apply_illegal_move(pile_index, amount):
    state = GameState(piles=(3, 0, 5), player=HUMAN)

    with pytest.raises(IllegalMoveError):
        apply_move(state, pile_index, amount)


def test_illegal_move_is_value_error():
    with pytest.raises(ValueError):
        apply_move(GameState(piles=(1,), player=AI), 0, 2)


def test_terminal_state():
    """Test terminal state detection."""
    assert is_terminal([0, 0, 0]) is True
    assert is_terminal([]) is True
    assert is_terminal(GameState(piles=(0, 0), player=AI)) is True


def test_non_terminal_state():
    assert is_terminal([0, 1, 0]) is False
    assert is_terminal(create_starting_state([3, 4, 5])) is False


def test_terminal_score():
    """AI facing an empty board has lost; the human facing one means the AI won."""
    assert terminal_score(AI) == -1
    assert terminal_score(HUMAN) == 1


def test_nim_sum():
    assert nim_sum([3, 4, 5]) == 2
    assert nim_sum([1, 1]) == 0
    assert nim_sum([]) == 0


def test_winner_is_last_mover():
    """Human empties the last pile: AI to move, human wins."""
    state = GameState(piles=(2,), player=HUMAN)

    final = apply_move(state, 0, 2)

    assert is_terminal(final)
    assert final.player == AI
    assert get_winner(final) == HUMAN


def test_no_winner_before_end():
    assert get_winner(GameState(piles=(1,), player=AI)) is None
