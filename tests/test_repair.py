from doublespairing.models.match import Match
from doublespairing.models.pair import Pair
from doublespairing.models.player import Gender
from doublespairing.models.settings import TournamentSettings
from doublespairing.pairing.repair import (
    RULE_ROUND_EXCLUSIVITY,
    count_assignments,
    repair_schedule,
)


def _teams(make_player, gender=Gender.FEMALE):
    return {
        team: [make_player(team, i + 1, 20 + 10 * (i + 1), gender) for i in range(3)]
        for team in ("A", "B")
    }


def _match(point, a_pair, b_pair):
    return Match(1, point, "A", "B", Pair(*a_pair), Pair(*b_pair))


def test_count_assignments_includes_idle_players(make_player):
    teams = _teams(make_player)
    a1, a2, a3 = teams["A"]
    b1, b2, _ = teams["B"]
    counts = count_assignments([_match(1, (a1, a2), (b1, b2))], teams["A"])
    assert counts == {a1.id: 1, a2.id: 1, a3.id: 0, b1.id: 1, b2.id: 1}


def test_idle_player_takes_a_slot_from_a_busy_teammate(make_player):
    teams = _teams(make_player)
    a1, a2, a3 = teams["A"]
    b1, b2, b3 = teams["B"]
    matches = [_match(1, (a1, a2), (b1, b2)), _match(2, (a1, a2), (b2, b3))]
    settings = TournamentSettings(
        players_per_team=3, points_per_round=2, total_rounds=1
    )
    assert settings.min_matches_per_player == 1

    report = repair_schedule(matches, teams, settings)

    assert report.assigned_counts[a3.id] == 1
    assert not report.shortfalls
    assert len(report.substitutions) == 1
    substitution = report.substitutions[0]
    assert substitution.recipient is a3
    assert substitution.team == "A"
    assert sum(m.pair1.includes(a3) for m in matches) == 1


def test_cheapest_slot_is_chosen_and_broken_rules_recorded(make_player):
    teams = _teams(make_player)
    a1, a2, a3 = teams["A"]
    b1, b2, b3 = teams["B"]
    matches = [
        _match(1, (a1, a2), (b1, b2)),
        _match(2, (a1, a3), (b2, b3)),
        _match(3, (a1, a2), (b1, b3)),
    ]
    settings = TournamentSettings(
        players_per_team=3,
        points_per_round=3,
        total_rounds=1,
        min_matches_per_player=2,
    )

    report = repair_schedule(matches, teams, settings)

    # Swapping into point 1 would also break the age order
    assert matches[2].pair1.key == frozenset({a2.id, a3.id})
    assert matches[0].pair1.key == frozenset({a1.id, a2.id})
    [substitution] = report.substitutions
    assert substitution.match_id == "R1-A-B-P3"
    assert substitution.donor is a1
    assert substitution.rules_broken == [RULE_ROUND_EXCLUSIVITY]
    assert report.assigned_counts[a1.id] == 2
    assert report.assigned_counts[a3.id] == 2


def test_nobody_above_the_floor_means_a_shortfall(make_player):
    teams = _teams(make_player)
    a1, a2, a3 = teams["A"]
    b1, b2, b3 = teams["B"]
    matches = [_match(1, (a1, a2), (b1, b2))]
    settings = TournamentSettings(
        players_per_team=3, points_per_round=1, total_rounds=1
    )

    report = repair_schedule(matches, teams, settings)

    assert report.shortfalls == {a3.id: 0, b3.id: 0}
    assert not report.substitutions


def test_undetermined_sides_are_filled(make_player):
    teams = _teams(make_player)
    a1, a2, a3 = teams["A"]
    b1, b2, _ = teams["B"]
    matches = [
        _match(1, (a1, a2), (b1, b2)),
        Match(1, 2, "A", "B", None, Pair(b1, b2)),
    ]
    settings = TournamentSettings(
        players_per_team=3, points_per_round=2, total_rounds=1
    )

    report = repair_schedule(matches, teams, settings)

    assert report.filled_gaps == ["R1-A-B-P2 team A"]
    # Players idle this round are preferred
    assert matches[1].pair1.includes(a3)
    assert not report.unfilled_gaps


def test_team_too_small_to_fill_a_gap(make_player):
    teams = _teams(make_player)
    teams["A"] = teams["A"][:1]
    b1, b2, _ = teams["B"]
    matches = [Match(1, 1, "A", "B", None, Pair(b1, b2))]
    settings = TournamentSettings(
        players_per_team=3, points_per_round=1, total_rounds=1
    )

    report = repair_schedule(matches, teams, settings)

    assert report.unfilled_gaps == ["R1-A-B-P1 team A"]
    assert matches[0].pair1 is None
