"""Random Tournament Generator (RTG) - seeded rosters and schedules for testing.

Produces reproducible four-team rosters with configurable size, gender mix,
age range and skill spread, runs the scheduler on them and optionally audits
the result with the schedule validator.
"""

# Doubles Pairing
# Copyright (C) 2025  Doubles Pairing developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

import json
import random
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Tuple

from doublespairing.constants import TEAM_SLOTS
from doublespairing.models.player import Gender, Player, SkillTier
from doublespairing.models.schedule_document import schedule_to_dict
from doublespairing.models.settings import TournamentMode, TournamentSettings
from doublespairing.pairing.schedule import generate_schedule
from doublespairing.type_hints import Teams
from doublespairing.utils import setup_logger
from doublespairing.validation.schedule_validator import create_schedule_validator

logger = setup_logger(__name__)


class SkillDistribution(Enum):
    """Skill tier spread across a generated roster."""

    UNIFORM = "uniform"
    CLUB = "club"  # mostly B, a few A and C
    STRONG = "strong"  # mostly A


SKILL_WEIGHTS_BY_DISTRIBUTION = {
    SkillDistribution.UNIFORM: (1, 1, 1),
    SkillDistribution.CLUB: (1, 3, 1),
    SkillDistribution.STRONG: (3, 1, 1),
}


@dataclass
class RTGConfig:
    """Configuration for Random Tournament Generator."""

    players_per_team: int = 10
    points_per_round: int = 5
    total_rounds: int = 3
    female_share: float = 0.4
    age_range: Tuple[int, int] = (20, 75)
    skill_distribution: SkillDistribution = SkillDistribution.CLUB
    mode: TournamentMode = TournamentMode.INTERNAL
    enforce_rules: bool = True
    seed: Optional[int] = None
    validate: bool = True

    def settings(self) -> TournamentSettings:
        return TournamentSettings(
            players_per_team=self.players_per_team,
            points_per_round=self.points_per_round,
            total_rounds=self.total_rounds,
            enforce_rules=self.enforce_rules,
            mode=self.mode,
        )


class PlayerFactory:
    """Factory for creating realistic team rosters."""

    def __init__(self, config: RTGConfig, rng: random.Random):
        self.config = config
        self.random = rng

    def create_teams(self) -> Teams:
        """Create ``players_per_team`` players for each team slot.

        Ages are distinct across the roster whenever the age range allows.
        """
        total = self.config.players_per_team * len(TEAM_SLOTS)
        ages = self._generate_ages(total)
        teams: Teams = {}
        number = 0
        for team in TEAM_SLOTS:
            women = round(self.config.players_per_team * self.config.female_share)
            roster = []
            for i in range(self.config.players_per_team):
                gender = Gender.FEMALE if i < women else Gender.MALE
                roster.append(
                    Player(
                        name=f"{team}{i + 1:02d}-{gender.value}",
                        age=ages[number],
                        gender=gender,
                        skill=self._generate_skill(),
                        team=team,
                        player_id=f"{team}-{i + 1:02d}",
                    )
                )
                number += 1
            teams[team] = roster

        logger.info(
            "Created %s players across %s teams with %s skill spread",
            total,
            len(teams),
            self.config.skill_distribution.value,
        )
        return teams

    def _generate_ages(self, count: int) -> List[int]:
        low, high = self.config.age_range
        if high - low + 1 >= count:
            return self.random.sample(range(low, high + 1), count)
        return [self.random.randint(low, high) for _ in range(count)]

    def _generate_skill(self) -> SkillTier:
        weights = SKILL_WEIGHTS_BY_DISTRIBUTION[self.config.skill_distribution]
        return self.random.choices(
            [SkillTier.A, SkillTier.B, SkillTier.C], weights=weights
        )[0]


class RandomTournamentGenerator:
    """Builds a roster and a full schedule from one seed."""

    def __init__(self, config: RTGConfig):
        self.config = config
        self.random = (
            random.Random(config.seed) if config.seed is not None else random.Random()
        )
        self.player_factory = PlayerFactory(config, self.random)

    def generate_complete_tournament(self) -> Dict:
        """Generate a roster and its schedule.

        Returns a dict with ``settings``, ``teams``, ``players``, ``result``
        (the ScheduleResult), ``matches`` and, when validating,
        ``violations``.
        """
        settings = self.config.settings()
        logger.info(
            "Generating tournament: %s players per team, %s rounds of %s points (%s)",
            settings.players_per_team,
            settings.total_rounds,
            settings.points_per_round,
            settings.mode.value,
        )
        teams = self.player_factory.create_teams()
        players = [p for roster in teams.values() for p in roster]
        result = generate_schedule(teams, settings, rng=self.random)

        tournament_data = {
            "settings": settings,
            "teams": teams,
            "players": players,
            "result": result,
            "matches": result.matches,
        }
        if self.config.validate:
            validator = create_schedule_validator()
            tournament_data["violations"] = validator.validate(
                result.matches, players, settings
            )

        logger.info("Tournament generation complete")
        return tournament_data

    def export_json_format(self, tournament_data: Dict) -> str:
        payload = schedule_to_dict(
            tournament_data["settings"],
            tournament_data["players"],
            tournament_data["matches"],
        )
        return json.dumps(payload, indent=2, ensure_ascii=False)


def create_small_tournament(seed: Optional[int] = None) -> RandomTournamentGenerator:
    """Four players per team, one round of three points."""
    config = RTGConfig(
        players_per_team=4,
        points_per_round=3,
        total_rounds=1,
        female_share=0.5,
        seed=seed,
    )
    return RandomTournamentGenerator(config)


def create_club_tournament(seed: Optional[int] = None) -> RandomTournamentGenerator:
    """The default club day: ten per team, three rounds of five points."""
    return RandomTournamentGenerator(RTGConfig(seed=seed))


def create_inter_club_tournament(
    seed: Optional[int] = None,
) -> RandomTournamentGenerator:
    """Home club (A, B) against away club (C, D), cross play every round."""
    config = RTGConfig(
        players_per_team=10,
        points_per_round=3,
        total_rounds=2,
        mode=TournamentMode.INTER_CLUB,
        seed=seed,
    )
    return RandomTournamentGenerator(config)
