from __future__ import annotations
from typing import Callable, List, Optional

from models.match import MatchCommentary, MatchEvent, MatchUpdate

UpdateCallback = Callable[[MatchUpdate], None]


class MatchFeed:
    """
    Bufor wyjścia symulacji.
    - Zdarzenia (MatchEvent) i komentarz (MatchCommentary) trzymamy w osobnych listach
    - Każdy wpis od razu trafia do callbacku `on_update` (synchronicznie, w kolejności emisji)
    - Przy verbose komentarz jest drukowany na stdout
    """

    def __init__(self, on_update: Optional[UpdateCallback] = None, *, verbose: bool = False) -> None:
        self.on_update = on_update
        self.verbose = verbose
        self.events: List[MatchEvent] = []
        self.commentary: List[MatchCommentary] = []

    def _publish(self, update: MatchUpdate) -> None:
        if self.on_update is not None:
            self.on_update(update)

    def comment(self, minute: int, text: str) -> MatchCommentary:
        line = MatchCommentary(minute=minute, text=text)
        self.commentary.append(line)
        if self.verbose:
            print(f"{minute}' - {text}")
        self._publish(line)
        return line

    def event(self, event: MatchEvent) -> MatchEvent:
        if self.events and event.minute < self.events[-1].minute:
            raise ValueError(f"Zdarzenie z minuty {event.minute} po minucie {self.events[-1].minute}")
        self.events.append(event)
        self._publish(event)
        return event
