from collections import defaultdict
from collections.abc import Sequence

from podiumboard.models.db.club import Club
from podiumboard.models.db.podium import Podium, PodiumPlace
from podiumboard.models.leaderboard import (
    ClubMedalTally,
    ClubPointsTally,
    LeaderboardFilters,
    LeaderboardView,
)
from podiumboard.utils.id_types import ClubId


def club_name_matches(club: Club, name_substring: str | None) -> bool:
    if name_substring is None:
        return True
    return name_substring.lower() in club.name.lower()


def get_clubs_with_podiums_in_scope(
    clubs: Sequence[Club],
    podiums: Sequence[Podium],
    filters: LeaderboardFilters | None = None,
) -> list[tuple[Club, list[Podium]]]:
    """
    Join podiums onto clubs after applying the leaderboard filters.

    The club name filter narrows the clubs, the category filter narrows the podiums. Every club
    that survives the name filter is returned, in input order, even if no podium joins onto it.
    Podiums whose club_id matches none of the returned clubs are dropped.
    """
    filters = filters or LeaderboardFilters()
    clubs_in_scope = [club for club in clubs if club_name_matches(club, filters.name_substring)]
    club_ids: set[ClubId] = {club.id for club in clubs_in_scope}

    podiums_by_club: defaultdict[ClubId, list[Podium]] = defaultdict(list)
    for podium in podiums:
        if filters.category is not None and podium.category != filters.category:
            continue
        club_id = ClubId(podium.club_id)
        if club_id in club_ids:
            podiums_by_club[club_id].append(podium)

    return [(club, podiums_by_club.get(club.id, [])) for club in clubs_in_scope]


def compute_medal_tallies(
    clubs: Sequence[Club],
    podiums: Sequence[Podium],
    filters: LeaderboardFilters | None = None,
) -> list[ClubMedalTally]:
    tallies = []
    for club, club_podiums in get_clubs_with_podiums_in_scope(clubs, podiums, filters):
        places = [podium.place for podium in club_podiums]
        tallies.append(
            ClubMedalTally(
                club=club,
                gold=places.count(PodiumPlace.GOLD),
                silver=places.count(PodiumPlace.SILVER),
                bronze=places.count(PodiumPlace.BRONZE),
            )
        )

    # sorted() is stable, so full ties keep the order the clubs came in.
    return sorted(tallies, key=lambda tally: (-tally.gold, -tally.silver, -tally.bronze))


def compute_points_tallies(
    clubs: Sequence[Club],
    podiums: Sequence[Podium],
    filters: LeaderboardFilters | None = None,
) -> list[ClubPointsTally]:
    tallies = [
        ClubPointsTally(club=club, points=sum(podium.points for podium in club_podiums))
        for club, club_podiums in get_clubs_with_podiums_in_scope(clubs, podiums, filters)
    ]
    return sorted(tallies, key=lambda tally: -tally.points)


def compute_leaderboard(
    clubs: Sequence[Club],
    podiums: Sequence[Podium],
    filters: LeaderboardFilters | None = None,
) -> LeaderboardView:
    return LeaderboardView(
        medals=compute_medal_tallies(clubs, podiums, filters),
        points=compute_points_tallies(clubs, podiums, filters),
    )
