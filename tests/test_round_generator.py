import random

from doublespairing.models.settings import TournamentMode, TournamentSettings
from doublespairing.pairing.round_generator import (
    generate_round,
    matchups_for_round,
    point_order,
)


def test_internal_matchups_cycle_every_three_rounds():
    settings = TournamentSettings()
    assert matchups_for_round(1, settings) == [("A", "B"), ("C", "D")]
    assert matchups_for_round(2, settings) == [("A", "C"), ("B", "D")]
    assert matchups_for_round(3, settings) == [("A", "D"), ("B", "C")]
    assert matchups_for_round(4, settings) == matchups_for_round(1, settings)


def test_inter_club_matchups_cross_the_clubs():
    settings = TournamentSettings(mode=TournamentMode.INTER_CLUB)
    matchups = matchups_for_round(1, settings)
    assert matchups == [("A", "C"), ("A", "D"), ("B", "C"), ("B", "D")]
    assert matchups_for_round(2, settings) == matchups


def test_point_order():
    assert point_order(TournamentSettings(points_per_round=5)) == [5, 1, 2, 3, 4]
    assert point_order(TournamentSettings(points_per_round=3)) == [1, 2, 3]
    relaxed = TournamentSettings(points_per_round=5, enforce_rules=False)
    assert point_order(relaxed) == [1, 2, 3, 4, 5]


def test_round_has_every_matchup_and_point(sixteen_player_roster, rng):
    settings = TournamentSettings(players_per_team=4, points_per_round=3)
    counts = {p.id: 0 for roster in sixteen_player_roster.values() for p in roster}

    outcome = generate_round(1, sixteen_player_roster, settings, counts, rng)

    assert [(m.team1, m.team2, m.point_number) for m in outcome.matches] == [
        ("A", "B", 1),
        ("A", "B", 2),
        ("A", "B", 3),
        ("C", "D", 1),
        ("C", "D", 2),
        ("C", "D", 3),
    ]
    assert all(m.is_complete for m in outcome.matches)
    assert not outcome.gaps
    assert set(counts.values()) == {0}


def test_pairs_play_for_their_own_team(sixteen_player_roster, rng):
    settings = TournamentSettings(players_per_team=4, points_per_round=3)
    outcome = generate_round(2, sixteen_player_roster, settings, {}, rng)
    for match in outcome.matches:
        for side in (1, 2):
            team = match.team_for(side)
            assert {p.team for p in match.pair_for(side).players} == {team}


def test_pairs_are_unique_within_a_round(sixteen_player_roster, rng):
    settings = TournamentSettings(players_per_team=4, points_per_round=5)
    outcome = generate_round(1, sixteen_player_roster, settings, {}, rng)
    for team in "ABCD":
        keys = [
            m.pair_for(side).key
            for m in outcome.matches
            for side in (1, 2)
            if m.team_for(side) == team
        ]
        assert len(keys) == len(set(keys))


def test_inter_club_round(sixteen_player_roster, rng):
    settings = TournamentSettings(
        players_per_team=4, points_per_round=2, mode=TournamentMode.INTER_CLUB
    )
    outcome = generate_round(1, sixteen_player_roster, settings, {}, rng)
    assert len(outcome.matches) == 8
    assert {m.matchup for m in outcome.matches} == {
        (1, "A", "C"),
        (1, "A", "D"),
        (1, "B", "C"),
        (1, "B", "D"),
    }


def test_team_without_a_pair_leaves_gaps(sixteen_player_roster, rng):
    teams = dict(sixteen_player_roster)
    teams["A"] = teams["A"][:1]
    settings = TournamentSettings(players_per_team=4, points_per_round=3)

    outcome = generate_round(1, teams, settings, {}, rng)

    a_b = [m for m in outcome.matches if m.team1 == "A"]
    assert len(a_b) == 3
    assert all(m.pair1 is None and m.pair2 is not None for m in a_b)
    assert [(g.team, g.opponent) for g in outcome.gaps] == [("A", "B")] * 3


def test_seeded_rounds_are_reproducible(sixteen_player_roster):
    settings = TournamentSettings(players_per_team=4, points_per_round=3)

    def _keys(seed):
        outcome = generate_round(
            1, sixteen_player_roster, settings, {}, random.Random(seed)
        )
        return [(m.pair1.key, m.pair2.key) for m in outcome.matches]

    assert _keys(42) == _keys(42)
