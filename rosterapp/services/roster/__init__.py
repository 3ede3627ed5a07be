"""
Roster service package: the remote Puppy Bowl API client and its operations.
"""

# --- Low-level HTTP client ---
from .client import (
    RosterAPIError,
    RosterDecodeError,
    RosterRejectedError,
    build_url,
    roster_request,
    roster_get,
    roster_post,
    roster_delete,
)

# --- Parsers ---
from .parsers import parse_players, parse_player, parse_new_player

# --- Public operations ---
from .players import (
    fetch_all_players,
    fetch_single_player,
    add_new_player,
    remove_player,
)
