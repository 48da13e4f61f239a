"""Default settings for the NWS client and report."""

NWS_BASE_URL = "https://api.weather.gov"
DEFAULT_USER_AGENT = "thunderman"
DEFAULT_WINDOW = 10
DEFAULT_DB_PATH = "data/thunderman.db"
