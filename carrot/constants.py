"""
Constants for the Carrot client library.
"""

from enum import Enum

DEFAULT_HOSTNAME = "gocarrot.com"

# Endpoints (users endpoint is formatted with the application id)
USERS_ENDPOINT = "/games/{app_id}/users.json"
ACHIEVEMENTS_ENDPOINT = "/me/achievements.json"
SCORES_ENDPOINT = "/me/scores.json"
ACTIONS_ENDPOINT = "/me/actions.json"
LIKE_ENDPOINT = "/me/like.json"

# Fields added to every signed request
FIELD_API_KEY = "api_key"
FIELD_GAME_ID = "game_id"
FIELD_REQUEST_DATE = "request_date"
FIELD_REQUEST_ID = "request_id"
FIELD_SIGNATURE = "sig"

# Slice of the SHA-1 hex digest used as request id
REQUEST_ID_START = 8
REQUEST_ID_END = 16

# Hosts contacted over plain HTTP (local development servers)
PLAIN_HTTP_HOSTS = ("localhost",)

# Default configuration values
DEFAULT_CONFIG = {
    'timeout': None,  # seconds; None leaves the transport default in place
}


class LikeObjectType(Enum):
    """Kinds of objects that can be liked through /me/like.json."""
    GAME = "game"
    PUBLISHER = "publisher"
    ACHIEVEMENT = "achievement"
    OBJECT = "object"
