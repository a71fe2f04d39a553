from doublespairing.models.match import Match, MatchStatus
from doublespairing.models.pair import Pair
from doublespairing.models.player import Gender, Player, SkillTier
from doublespairing.models.settings import (
    TournamentMode,
    TournamentSettings,
    derive_min_matches,
)

__all__ = [
    "Player",
    "Gender",
    "SkillTier",
    "Pair",
    "Match",
    "MatchStatus",
    "TournamentSettings",
    "TournamentMode",
    "derive_min_matches",
]
