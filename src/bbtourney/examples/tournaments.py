import random

from ..config import TournamentConfig
from ..models.tournament import Tournament, TournamentResult

TEAM_NAMES = {
    "CAN": "Canada",
    "AUS": "Australia",
    "GRE": "Greece",
    "ESP": "Spain",
    "GER": "Germany",
    "FRA": "France",
    "BRA": "Brazil",
    "JPN": "Japan",
    "USA": "United States",
    "SRB": "Serbia",
    "SSD": "South Sudan",
    "PRI": "Puerto Rico",
    "POR": "Portugal",
}

SAMPLE_GROUPS = {
    "A": [
        {"Team": "Canada", "ISOCode": "CAN", "FIBARanking": 7},
        {"Team": "Australia", "ISOCode": "AUS", "FIBARanking": 5},
        {"Team": "Greece", "ISOCode": "GRE", "FIBARanking": 14},
        {"Team": "Spain", "ISOCode": "ESP", "FIBARanking": 2},
    ],
    "B": [
        {"Team": "Germany", "ISOCode": "GER", "FIBARanking": 3},
        {"Team": "France", "ISOCode": "FRA", "FIBARanking": 9},
        {"Team": "Brazil", "ISOCode": "BRA", "FIBARanking": 12},
        {"Team": "Japan", "ISOCode": "JPN", "FIBARanking": 26},
    ],
    "C": [
        {"Team": "United States", "ISOCode": "USA", "FIBARanking": 1},
        {"Team": "Serbia", "ISOCode": "SRB", "FIBARanking": 4},
        {"Team": "South Sudan", "ISOCode": "SSD", "FIBARanking": 34},
        {"Team": "Puerto Rico", "ISOCode": "PRI", "FIBARanking": 16},
    ],
}

SAMPLE_EXHIBITIONS = {
    "CAN": [
        {"Date": "06/07/24", "Opponent": "GER", "Result": "92-80"},
        {"Date": "16/07/24", "Opponent": "USA", "Result": "72-86"},
    ],
    "AUS": [
        {"Date": "07/07/24", "Opponent": "SRB", "Result": "69-75"},
        {"Date": "15/07/24", "Opponent": "USA", "Result": "92-98"},
    ],
    "GRE": [
        {"Date": "14/07/24", "Opponent": "ESP", "Result": "78-84"},
        {"Date": "24/07/24", "Opponent": "POR", "Result": "92-71"},
    ],
    "ESP": [
        {"Date": "14/07/24", "Opponent": "GRE", "Result": "84-78"},
        {"Date": "22/07/24", "Opponent": "PRI", "Result": "103-74"},
    ],
    "GER": [
        {"Date": "06/07/24", "Opponent": "CAN", "Result": "80-92"},
        {"Date": "19/07/24", "Opponent": "FRA", "Result": "88-66"},
    ],
    "FRA": [
        {"Date": "19/07/24", "Opponent": "GER", "Result": "66-88"},
        {"Date": "21/07/24", "Opponent": "SRB", "Result": "67-79"},
    ],
    "BRA": [
        {"Date": "13/07/24", "Opponent": "PRI", "Result": "84-79"},
        {"Date": "20/07/24", "Opponent": "JPN", "Result": "99-90"},
    ],
    "JPN": [
        {"Date": "05/07/24", "Opponent": "GER", "Result": "83-90"},
        {"Date": "20/07/24", "Opponent": "BRA", "Result": "90-99"},
    ],
    "USA": [
        {"Date": "15/07/24", "Opponent": "AUS", "Result": "98-92"},
        {"Date": "16/07/24", "Opponent": "CAN", "Result": "86-72"},
        {"Date": "17/07/24", "Opponent": "SRB", "Result": "105-79"},
    ],
    "SRB": [
        {"Date": "07/07/24", "Opponent": "AUS", "Result": "75-69"},
        {"Date": "17/07/24", "Opponent": "USA", "Result": "79-105"},
        {"Date": "21/07/24", "Opponent": "FRA", "Result": "79-67"},
    ],
    "SSD": [
        {"Date": "08/07/24", "Opponent": "SRB", "Result": "76-89"},
        {"Date": "20/07/24", "Opponent": "USA", "Result": "100-101"},
    ],
    "PRI": [
        {"Date": "13/07/24", "Opponent": "BRA", "Result": "79-84"},
        {"Date": "22/07/24", "Opponent": "ESP", "Result": "74-103"},
    ],
}


def display_name(code: str) -> str:
    return TEAM_NAMES.get(code, code)


def print_exhibitions(exhibitions=SAMPLE_EXHIBITIONS):
    print("Friendly Matches:")
    for team, matches in exhibitions.items():
        print(f"{display_name(team)}:")
        for match in matches:
            print(
                f"    {display_name(team)} - {display_name(match['Opponent'])} "
                f"({match['Result']})"
            )
    print()


def print_result(result: TournamentResult):
    for name, group in result.groups.items():
        print(f"Group {name} matches:")
        for match in group.matches:
            print(f"    {match}")
        print(f"Final standings for group {name}:")
        print("    Team / W / L / Pts / Scored / Conceded / Diff")
        for i, team in enumerate(group.standings, 1):
            print(
                f"    {i}. {team.name} {team.wins} / {team.losses} / {team.points} / "
                f"{team.scored} / {team.conceded} / {team.goal_difference:+d}"
            )
        print()

    print("Hats:")
    for hat in result.draw.hats:
        print(f"    {hat}")
    print(f"\nQuarter Finals (drawn in {result.draw.attempts} attempt(s)):")
    for i, (team1, team2) in enumerate(result.quarterfinals, 1):
        print(f"    Match {i}: {team1.name} vs {team2.name}")

    for round in result.bracket.rounds:
        print(f"\n{round.name}:")
        for match in round.matches:
            print(f"    {match}")
            if match.went_to_penalties:
                print(f"    {match.winner.name} wins on penalties ({match.penalties})")

    print(f"\nChampion: {result.champion.name}")
    print(f"Runner-up: {result.runner_up.name}")
    if result.third_place is not None:
        print(f"Third place: {result.third_place.name}")


def simulate_olympics(seed: int | None = None, third_place_mode: str = "runner_up"):
    """Simulate the sample tournament and print every stage."""
    rng = random.Random(seed)
    config = TournamentConfig(third_place_mode=third_place_mode)
    tournament = Tournament(
        "Olympic Basketball Tournament", SAMPLE_GROUPS, SAMPLE_EXHIBITIONS, config, rng
    )

    print_exhibitions()
    result = tournament.simulate()
    print_result(result)
    return result


if __name__ == "__main__":
    simulate_olympics()
