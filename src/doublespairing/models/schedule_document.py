"""JSON interchange document for a roster, its settings and a schedule."""

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
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List

from doublespairing.constants import TEAM_SLOTS
from doublespairing.exceptions import FileLoadException
from doublespairing.models.match import Match
from doublespairing.models.player import Player
from doublespairing.models.settings import TournamentSettings
from doublespairing.type_hints import Teams


@dataclass
class ScheduleDocument:
    settings: TournamentSettings
    players: List[Player]
    matches: List[Match]

    @property
    def teams(self) -> Teams:
        return teams_from_players(self.players)


def teams_from_players(players: List[Player]) -> Teams:
    """Partition a flat roster into the four team slots."""
    teams: Teams = {slot: [] for slot in TEAM_SLOTS}
    for player in players:
        teams.setdefault(player.team, []).append(player)
    return teams


def schedule_to_dict(
    settings: TournamentSettings, players: List[Player], matches: List[Match]
) -> Dict[str, Any]:
    return {
        "settings": settings.to_dict(),
        "players": [p.to_dict() for p in players],
        "matches": [m.to_dict() for m in matches],
    }


def schedule_from_dict(data: Dict[str, Any]) -> ScheduleDocument:
    """Build a document from its JSON form.

    Raises:
        FileLoadException: If a match record is missing fields or malformed
    """
    settings = TournamentSettings.from_dict(data.get("settings", {}))
    players = [Player.from_dict(p) for p in data.get("players", [])]
    players_by_id = {p.id: p for p in players}
    try:
        matches = [Match.from_dict(m, players_by_id) for m in data.get("matches", [])]
    except (KeyError, IndexError, TypeError, ValueError) as e:
        raise FileLoadException(f"Malformed match record: {e!r}") from e
    return ScheduleDocument(settings=settings, players=players, matches=matches)


def save_schedule(path: Path, document: ScheduleDocument) -> None:
    payload = schedule_to_dict(document.settings, document.players, document.matches)
    path.write_text(json.dumps(payload, indent=2, ensure_ascii=False), encoding="utf-8")


def load_schedule(path: Path) -> ScheduleDocument:
    """Load a schedule document from a JSON file.

    Raises:
        FileLoadException: If the file is missing or not valid JSON
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise FileLoadException(f"Could not load schedule from {path}: {e}") from e
    return schedule_from_dict(data)
