import random

import pytest

from doublespairing.constants import TEAM_SLOTS
from doublespairing.models.player import Gender, Player, SkillTier


def _player(team, number, age, gender=Gender.MALE, skill=SkillTier.B):
    return Player(
        name=f"{team}{number}",
        age=age,
        gender=gender,
        skill=skill,
        team=team,
        player_id=f"{team}-{number}",
    )


@pytest.fixture
def make_player():
    return _player


@pytest.fixture
def sixteen_player_roster():
    """Four teams of four, two women and two men each, ages 20..60 distinct."""
    ages = iter(random.Random(7).sample(range(20, 61), 16))
    skills = [SkillTier.A, SkillTier.B, SkillTier.B, SkillTier.C]
    teams = {}
    for team in TEAM_SLOTS:
        teams[team] = [
            _player(
                team,
                i + 1,
                next(ages),
                Gender.FEMALE if i < 2 else Gender.MALE,
                skills[i],
            )
            for i in range(4)
        ]
    return teams


@pytest.fixture
def rng():
    return random.Random(1234)
