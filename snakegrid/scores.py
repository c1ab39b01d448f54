"""Per-map high scores kept in a plain text file."""

from __future__ import annotations

from pathlib import Path

DEFAULT_SCORE_FILE = "scores.txt"


def _to_int(text: str) -> int:
    try:
        return int(text)
    except ValueError:
        return 0


class ScoreManager:
    """Keeps the best score for each map and stores them as ``name:score`` lines."""

    def __init__(self, path: str | Path = DEFAULT_SCORE_FILE) -> None:
        self.path = Path(path)
        self.scores: dict[str, int] = {}

    def load(self) -> None:
        """Read scores from the file; a missing or unreadable file is ignored."""
        try:
            text = self.path.read_text(encoding="utf-8")
        except OSError:
            return
        for line in text.splitlines():
            parts = line.split(":")
            if len(parts) == 2:
                self.scores[parts[0]] = _to_int(parts[1])

    def save(self) -> None:
        """Write all scores, ordered by map name; write failures are ignored."""
        content = "".join(
            f"{name}:{score}\n" for name, score in sorted(self.scores.items())
        )
        try:
            self.path.write_text(content, encoding="utf-8")
        except OSError:
            return

    def high_score(self, map_name: str) -> int:
        """Return the best score for the map, or 0 if none is known."""
        return self.scores.get(map_name, 0)

    def update(self, map_name: str, score: int) -> None:
        """Record the score if it beats the map's best, saving on improvement."""
        best = self.scores.setdefault(map_name, 0)
        if score > best:
            self.scores[map_name] = score
            self.save()