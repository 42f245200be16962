import os

PLAYLIST_ID_PREFIX = os.getenv("PLAYLIST_ID_PREFIX", "playlist-")
PLAYLIST_ID_LENGTH = 16
MEMBERSHIP_ID_LENGTH = 16

USER_ID_HEADER = os.getenv("USER_ID_HEADER", "X-User-Id")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
