import os
from dotenv import load_dotenv

# every page imports this first, so `.env` applies to all of them
load_dotenv(override=False)

TSDB_API_KEY  = os.getenv("TSDB_API_KEY", "3")   # free v1 key
TSDB_BASE_URL = os.getenv("TSDB_BASE_URL", f"https://www.thesportsdb.com/api/v1/json/{TSDB_API_KEY}")
HTTP_TIMEOUT_S = float(os.getenv("HTTP_TIMEOUT_S", "10"))
USER_AGENT    = os.getenv("USER_AGENT", (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
    "AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/135.0.0.0 Safari/537.36"
))
LOG_LEVEL     = os.getenv("LOG_LEVEL", "INFO")

# Browser storage keys for the favorites sets
FAVORITE_MATCHES_KEY  = "favoriteMatches"
FAVORITE_TEAMS_KEY    = "favoriteTeams"
FAVORITES_COOKIE_DAYS = int(os.getenv("FAVORITES_COOKIE_DAYS", "365"))

STATUS_ALL  = "all"
BUCKET_ALL  = "all"
DATE_BUCKETS = ["all", "today", "tomorrow", "week"]
WEEK_DAYS   = 7

UNKNOWN_FOUNDED     = "Unknown"
UNKNOWN_STADIUM     = "Unknown Stadium"
UNKNOWN_LEAGUE      = "Unknown League"
NO_DESCRIPTION      = "No description available"
SEARCH_SUGGESTIONS  = ["Arsenal", "Barcelona", "Manchester United"]
