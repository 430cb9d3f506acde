from podiumboard.logic.ranking.tallies import (
    compute_leaderboard,
    compute_medal_tallies,
    compute_points_tallies,
    get_clubs_with_podiums_in_scope,
)
from podiumboard.models.db.podium import PodiumCategory, PodiumPlace
from podiumboard.models.leaderboard import LeaderboardFilters
from podiumboard.utils.dummy_records import dummy_club, dummy_podium

GOLD = PodiumPlace.GOLD
SILVER = PodiumPlace.SILVER
BRONZE = PodiumPlace.BRONZE


def test_two_golds_beat_one_silver_and_orphan_is_ignored() -> None:
    clubs = [dummy_club("a", "Alpha"), dummy_club("b", "Beta")]
    podiums = [
        dummy_podium("a", GOLD, points=10),
        dummy_podium("a", GOLD, points=10),
        dummy_podium("b", SILVER, points=5),
        dummy_podium("c", GOLD, points=99),
    ]

    view = compute_leaderboard(clubs, podiums)

    assert [(tally.club.id, tally.gold, tally.silver, tally.bronze) for tally in view.medals] == [
        ("a", 2, 0, 0),
        ("b", 0, 1, 0),
    ]
    assert [(tally.club.id, tally.points) for tally in view.points] == [("a", 20), ("b", 5)]


def test_alpha_beta_medals_and_points() -> None:
    alpha = dummy_club("A", "Alpha Club")
    beta = dummy_club("B", "Beta")
    podiums = [
        dummy_podium("A", GOLD, points=10),
        dummy_podium("A", BRONZE, points=4),
        dummy_podium("B", GOLD, points=10),
        dummy_podium("B", SILVER, points=7),
    ]

    medals = compute_medal_tallies([alpha, beta], podiums)
    points = compute_points_tallies([alpha, beta], podiums)

    assert [(tally.club.id, tally.medal_key) for tally in medals] == [
        ("B", (1, 1, 0)),
        ("A", (1, 0, 1)),
    ]
    assert [(tally.club.id, tally.points) for tally in points] == [("B", 17), ("A", 14)]


def test_name_filter_is_case_insensitive_substring() -> None:
    clubs = [dummy_club("A", "Alpha Club"), dummy_club("B", "Beta"), dummy_club("C", "Palpable")]

    medals = compute_medal_tallies(clubs, [], LeaderboardFilters(name_substring="alp"))

    assert [tally.club.name for tally in medals] == ["Alpha Club", "Palpable"]


def test_blank_name_filter_keeps_every_club() -> None:
    clubs = [dummy_club("A", "Alpha Club"), dummy_club("B", "Beta")]

    medals = compute_medal_tallies(clubs, [], LeaderboardFilters(name_substring="   "))

    assert len(medals) == 2


def test_category_filter_applies_before_tallying() -> None:
    alpha = dummy_club("A", "Alpha Club")
    beta = dummy_club("B", "Beta")
    podiums = [
        dummy_podium("A", GOLD, points=10, category=PodiumCategory.U15),
        dummy_podium("A", GOLD, points=10, category=PodiumCategory.SENIOR),
        dummy_podium("B", SILVER, points=7, category=PodiumCategory.U15),
    ]
    filters = LeaderboardFilters(category=PodiumCategory.U15)

    view = compute_leaderboard([alpha, beta], podiums, filters)

    assert [(tally.club.id, tally.medal_key) for tally in view.medals] == [
        ("A", (1, 0, 0)),
        ("B", (0, 1, 0)),
    ]
    assert [(tally.club.id, tally.points) for tally in view.points] == [("A", 10), ("B", 7)]


def test_zero_podium_clubs_appear_with_zero_counts() -> None:
    alpha = dummy_club("A", "Alpha Club")
    empty = dummy_club("E", "Empty Club")

    view = compute_leaderboard([empty, alpha], [dummy_podium("A", BRONZE, points=4)])

    assert [(tally.club.id, tally.medal_key) for tally in view.medals] == [
        ("A", (0, 0, 1)),
        ("E", (0, 0, 0)),
    ]
    assert [(tally.club.id, tally.points) for tally in view.points] == [("A", 4), ("E", 0)]


def test_orphan_podiums_affect_no_row() -> None:
    clubs = [dummy_club("A", "Alpha Club")]
    podiums = [dummy_podium("A", SILVER, points=7), dummy_podium("gone", GOLD, points=10)]

    view = compute_leaderboard(clubs, podiums)

    assert len(view.medals) == 1
    assert view.medals[0].medal_key == (0, 1, 0)
    assert view.points[0].points == 7


def test_full_ties_keep_input_order() -> None:
    clubs = [dummy_club(club_id, f"Club {club_id}") for club_id in ("C", "A", "B")]
    podiums = [dummy_podium(club_id, GOLD, points=5) for club_id in ("A", "B", "C")]

    medals = compute_medal_tallies(clubs, podiums)
    points = compute_points_tallies(clubs, podiums)

    assert [tally.club.id for tally in medals] == ["C", "A", "B"]
    assert [tally.club.id for tally in points] == ["C", "A", "B"]


def test_medal_order_uses_silver_then_bronze_to_break_ties() -> None:
    clubs = [dummy_club(club_id, f"Club {club_id}") for club_id in ("A", "B", "C", "D")]
    podiums = [
        dummy_podium("A", GOLD),
        dummy_podium("A", BRONZE),
        dummy_podium("B", GOLD),
        dummy_podium("B", SILVER),
        dummy_podium("C", SILVER),
        dummy_podium("C", SILVER),
        dummy_podium("C", SILVER),
        dummy_podium("D", GOLD),
        dummy_podium("D", BRONZE),
        dummy_podium("D", BRONZE),
    ]

    medals = compute_medal_tallies(clubs, podiums)

    assert [tally.club.id for tally in medals] == ["B", "D", "A", "C"]
    keys = [tally.medal_key for tally in medals]
    assert keys == sorted(keys, reverse=True)


def test_totals_match_joined_podiums() -> None:
    clubs = [dummy_club("A", "Alpha Club"), dummy_club("B", "Beta"), dummy_club("C", "Gamma")]
    podiums = [
        dummy_podium("A", GOLD, points=10),
        dummy_podium("A", SILVER, points=7),
        dummy_podium("B", BRONZE, points=4),
        dummy_podium("C", BRONZE, points=3),
        dummy_podium("C", GOLD, points=12),
        dummy_podium("missing", GOLD, points=100),
    ]
    joined = [podium for podium in podiums if podium.club_id != "missing"]

    view = compute_leaderboard(clubs, podiums)

    assert sum(sum(tally.medal_key) for tally in view.medals) == len(joined)
    assert sum(tally.points for tally in view.points) == sum(podium.points for podium in joined)
    points = [tally.points for tally in view.points]
    assert points == sorted(points, reverse=True)


def test_name_filter_drops_podiums_of_filtered_clubs() -> None:
    clubs = [dummy_club("A", "Alpha Club"), dummy_club("B", "Beta")]
    podiums = [dummy_podium("A", GOLD, points=10), dummy_podium("B", GOLD, points=10)]

    scoped = get_clubs_with_podiums_in_scope(clubs, podiums, LeaderboardFilters(name_substring="BETA"))

    assert [(club.id, len(club_podiums)) for club, club_podiums in scoped] == [("B", 1)]


def test_empty_inputs_give_empty_results() -> None:
    view = compute_leaderboard([], [dummy_podium("A", GOLD)])

    assert view.medals == []
    assert view.points == []


def test_inputs_are_not_mutated() -> None:
    clubs = [dummy_club("B", "Beta"), dummy_club("A", "Alpha Club")]
    podiums = [dummy_podium("A", GOLD), dummy_podium("B", BRONZE)]
    clubs_before = list(clubs)
    podiums_before = list(podiums)

    compute_leaderboard(clubs, podiums, LeaderboardFilters(name_substring="a"))

    assert clubs == clubs_before
    assert podiums == podiums_before
