"""Append-only, in-memory record of conversation turns."""

from collections.abc import Iterator

from src.models.schemas import HistoryEntry, Turn


class TranscriptStore:
    """Ordered sequence of turns driving the rendered view.

    No deduplication and no size cap: the store lives as long as the page.
    """

    def __init__(self, turns: list[Turn] | None = None) -> None:
        self._turns: list[Turn] = list(turns or [])

    def append(self, turn: Turn) -> None:
        self._turns.append(turn)

    def render(self) -> tuple[Turn, ...]:
        """Return a read-only snapshot for the UI."""
        return tuple(self._turns)

    def history(self, window: int | None = None) -> list[HistoryEntry]:
        """Return turns in the shape a new session is seeded with.

        Args:
            window: Keep only the most recent ``window`` entries.
                    None keeps everything.
        """
        turns = self._turns
        if window is not None:
            turns = turns[-window:] if window > 0 else []
        return [HistoryEntry.from_turn(turn) for turn in turns]

    def __len__(self) -> int:
        return len(self._turns)

    def __iter__(self) -> Iterator[Turn]:
        return iter(self.render())
