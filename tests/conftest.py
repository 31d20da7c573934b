import itertools

import pytest

from roundnetpairing.player import Player


@pytest.fixture
def make_player():
    """Factory for players with predictable ids ``p01``, ``p02``..."""
    counter = itertools.count(1)

    def _make(name=None, score=0.0, rating=None, **kwargs):
        number = next(counter)
        player_id = kwargs.pop("player_id", f"p{number:02d}")
        return Player(
            name=name or f"Player {number:02d}",
            initial_skill_rating=rating,
            player_id=player_id,
            score=score,
            **kwargs,
        )

    return _make


@pytest.fixture
def make_players(make_player):
    def _make(count, **kwargs):
        return [make_player(**kwargs) for _ in range(count)]

    return _make
