# rosterapp/services/state.py
from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Iterable, Optional, Tuple

from rosterapp.schemas.player import Player
from rosterapp.views.document import Document


@dataclass
class AppState:
    """
    Last fetched roster plus the player open in the detail view.
    `players` is only ever replaced as a whole.
    """
    players: Tuple[Player, ...] = ()
    selected_player: Optional[Player] = None

    def replace_players(self, players: Iterable[Player]) -> None:
        self.players = tuple(players)
        # a selection must come from the latest fetch
        if self.selected_player is not None and self.selected_player not in self.players:
            self.selected_player = None

    def select(self, player_id: int) -> Optional[Player]:
        found = next((p for p in self.players if p.id == player_id), None)
        self.selected_player = found
        return found

    def clear_selection(self) -> None:
        self.selected_player = None

    @property
    def view(self) -> str:
        return "detail" if self.selected_player is not None else "list"


@dataclass
class RosterContext:
    """Everything one page owns: its state, its document, and the lock that serializes its events."""
    state: AppState = field(default_factory=AppState)
    document: Document = field(default_factory=Document.host)
    lock: threading.Lock = field(default_factory=threading.Lock, repr=False)
