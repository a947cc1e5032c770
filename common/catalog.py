"""
Literal catalog the pages render from.

The data mirrors the JSON shape of a typical fixtures feed (camelCase keys)
and is turned into model objects by `controllers.data_controller`. Nothing
here is mutated at runtime; the Teams page keeps its own extended copy in
`st.session_state` when a remote search adds a team.

Match details only carry what the fixture list does not: the event timeline
and the stats. They are joined with `MATCHES` by id.
"""

MATCHES = [
    {
        "id": "1",
        "homeTeam": "Arsenal",
        "awayTeam": "Chelsea",
        "homeScore": 2,
        "awayScore": 1,
        "date": "2025-01-07",
        "time": "15:00",
        "status": "Completed",
        "competition": "Premier League",
        "venue": "Emirates Stadium",
    },
    {
        "id": "2",
        "homeTeam": "Manchester United",
        "awayTeam": "Liverpool",
        "date": "2025-01-08",
        "time": "17:30",
        "status": "Scheduled",
        "competition": "Premier League",
        "venue": "Old Trafford",
    },
    {
        "id": "3",
        "homeTeam": "Manchester City",
        "awayTeam": "Tottenham",
        "homeScore": 3,
        "awayScore": 0,
        "date": "2025-01-06",
        "time": "12:30",
        "status": "Completed",
        "competition": "Premier League",
        "venue": "Etihad Stadium",
    },
    {
        "id": "4",
        "homeTeam": "Newcastle",
        "awayTeam": "Brighton",
        "date": "2025-01-09",
        "time": "20:00",
        "status": "Scheduled",
        "competition": "Premier League",
        "venue": "St. James' Park",
    },
    {
        "id": "5",
        "homeTeam": "Aston Villa",
        "awayTeam": "West Ham",
        "homeScore": 1,
        "awayScore": 1,
        "date": "2025-01-05",
        "time": "14:00",
        "status": "Completed",
        "competition": "Premier League",
        "venue": "Villa Park",
    },
]

MATCH_DETAILS = {
    "1": {
        "events": [
            {"id": "1", "type": "goal", "player": "Saka", "team": "Arsenal", "minute": 23, "assist": "Ødegaard"},
            {"id": "2", "type": "yellow_card", "player": "Silva", "team": "Chelsea", "minute": 34},
            {"id": "3", "type": "goal", "player": "Sterling", "team": "Chelsea", "minute": 56},
            {"id": "4", "type": "goal", "player": "Jesus", "team": "Arsenal", "minute": 72, "assist": "Martinelli"},
            {"id": "5", "type": "substitution", "player": "Havertz → Mudryk", "team": "Chelsea", "minute": 78},
        ],
        "stats": {
            "possession": {"home": 58, "away": 42},
            "shots": {"home": 14, "away": 8},
            "shotsOnTarget": {"home": 6, "away": 4},
            "fouls": {"home": 12, "away": 16},
            "corners": {"home": 7, "away": 3},
            "yellowCards": {"home": 2, "away": 4},
        },
    },
    "2": {
        "events": [
            {"id": "1", "type": "goal", "player": "Rashford", "team": "Manchester United", "minute": 34, "assist": "Bruno"},
            {"id": "2", "type": "yellow_card", "player": "Casemiro", "team": "Manchester United", "minute": 45},
            {"id": "3", "type": "goal", "player": "Salah", "team": "Liverpool", "minute": 67},
            {"id": "4", "type": "yellow_card", "player": "Van Dijk", "team": "Liverpool", "minute": 78},
        ],
        "stats": {
            "possession": {"home": 45, "away": 55},
            "shots": {"home": 10, "away": 12},
            "shotsOnTarget": {"home": 4, "away": 5},
            "fouls": {"home": 14, "away": 11},
            "corners": {"home": 5, "away": 8},
            "yellowCards": {"home": 3, "away": 2},
        },
    },
    "3": {
        "events": [
            {"id": "1", "type": "goal", "player": "Haaland", "team": "Manchester City", "minute": 15, "assist": "De Bruyne"},
            {"id": "2", "type": "goal", "player": "Foden", "team": "Manchester City", "minute": 34},
            {"id": "3", "type": "yellow_card", "player": "Romero", "team": "Tottenham", "minute": 56},
            {"id": "4", "type": "goal", "player": "Haaland", "team": "Manchester City", "minute": 78, "assist": "Grealish"},
        ],
        "stats": {
            "possession": {"home": 68, "away": 32},
            "shots": {"home": 18, "away": 6},
            "shotsOnTarget": {"home": 8, "away": 2},
            "fouls": {"home": 8, "away": 15},
            "corners": {"home": 9, "away": 2},
            "yellowCards": {"home": 1, "away": 3},
        },
    },
}

TEAMS = [
    {
        "id": "1",
        "name": "Arsenal",
        "founded": "1886",
        "stadium": "Emirates Stadium",
        "league": "Premier League",
        "color": "#DC2626",
        "description": "Arsenal Football Club is a professional football club based in Islington, London, England.",
        "recentMatches": [
            {"opponent": "Chelsea", "result": "W 2-1", "date": "2025-01-07"},
            {"opponent": "Liverpool", "result": "D 1-1", "date": "2025-01-04"},
            {"opponent": "Man City", "result": "L 0-2", "date": "2025-01-01"},
            {"opponent": "Tottenham", "result": "W 3-1", "date": "2024-12-28"},
            {"opponent": "Brighton", "result": "W 2-0", "date": "2024-12-25"},
        ],
    },
    {
        "id": "2",
        "name": "Chelsea",
        "founded": "1905",
        "stadium": "Stamford Bridge",
        "league": "Premier League",
        "color": "#1D4ED8",
        "description": "Chelsea Football Club is a professional football club based in Fulham, West London, England.",
        "recentMatches": [
            {"opponent": "Arsenal", "result": "L 1-2", "date": "2025-01-07"},
            {"opponent": "Newcastle", "result": "W 3-0", "date": "2025-01-04"},
            {"opponent": "Aston Villa", "result": "W 2-1", "date": "2025-01-01"},
            {"opponent": "West Ham", "result": "D 2-2", "date": "2024-12-28"},
            {"opponent": "Everton", "result": "W 4-0", "date": "2024-12-25"},
        ],
    },
    {
        "id": "3",
        "name": "Manchester United",
        "founded": "1878",
        "stadium": "Old Trafford",
        "league": "Premier League",
        "color": "#DC2626",
        "description": (
            "Manchester United Football Club is a professional football club based in Old Trafford, "
            "Greater Manchester, England."
        ),
        "recentMatches": [
            {"opponent": "Liverpool", "result": "D 0-0", "date": "2025-01-08"},
            {"opponent": "Man City", "result": "L 1-3", "date": "2025-01-05"},
            {"opponent": "Tottenham", "result": "W 2-1", "date": "2025-01-02"},
            {"opponent": "Arsenal", "result": "L 0-1", "date": "2024-12-29"},
            {"opponent": "Chelsea", "result": "W 3-2", "date": "2024-12-26"},
        ],
    },
    {
        "id": "4",
        "name": "Liverpool",
        "founded": "1892",
        "stadium": "Anfield",
        "league": "Premier League",
        "color": "#DC2626",
        "description": "Liverpool Football Club is a professional football club based in Liverpool, England.",
        "recentMatches": [
            {"opponent": "Man United", "result": "D 0-0", "date": "2025-01-08"},
            {"opponent": "Arsenal", "result": "D 1-1", "date": "2025-01-04"},
            {"opponent": "Chelsea", "result": "W 2-0", "date": "2025-01-01"},
            {"opponent": "Newcastle", "result": "W 3-1", "date": "2024-12-28"},
            {"opponent": "Brighton", "result": "W 1-0", "date": "2024-12-25"},
        ],
    },
    {
        "id": "5",
        "name": "Manchester City",
        "founded": "1880",
        "stadium": "Etihad Stadium",
        "league": "Premier League",
        "color": "#0EA5E9",
        "description": "Manchester City Football Club is a professional football club based in Manchester, England.",
        "recentMatches": [
            {"opponent": "Tottenham", "result": "W 3-0", "date": "2025-01-06"},
            {"opponent": "Man United", "result": "W 3-1", "date": "2025-01-05"},
            {"opponent": "Arsenal", "result": "W 2-0", "date": "2025-01-01"},
            {"opponent": "Liverpool", "result": "L 1-2", "date": "2024-12-28"},
            {"opponent": "Chelsea", "result": "D 1-1", "date": "2024-12-25"},
        ],
    },
    {
        "id": "6",
        "name": "Tottenham",
        "founded": "1882",
        "stadium": "Tottenham Hotspur Stadium",
        "league": "Premier League",
        "color": "#1E40AF",
        "description": "Tottenham Hotspur Football Club is a professional football club based in North London, England.",
        "recentMatches": [
            {"opponent": "Man City", "result": "L 0-3", "date": "2025-01-06"},
            {"opponent": "Man United", "result": "L 1-2", "date": "2025-01-02"},
            {"opponent": "Arsenal", "result": "L 1-3", "date": "2024-12-28"},
            {"opponent": "Chelsea", "result": "W 2-1", "date": "2024-12-25"},
            {"opponent": "Liverpool", "result": "D 1-1", "date": "2024-12-22"},
        ],
    },
]
