import json
import logging
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

from pasjans.config import LEADERBOARD_TOP_N, MAX_PLAYER_NAME, SCORES_FILE, Difficulty

logger = logging.getLogger(__name__)

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"
DEFAULT_PLAYER = "Anonim"


def clean_player_name(name):
    name = (name or "").strip()
    if not name:
        return DEFAULT_PLAYER
    return name[:MAX_PLAYER_NAME]


@dataclass(frozen=True)
class ScoreEntry:
    player: str
    moves: int
    difficulty: Difficulty
    timestamp: str

    @classmethod
    def create(cls, player, moves, difficulty, when=None):
        when = when or datetime.now()
        return cls(clean_player_name(player), moves, difficulty, when.strftime(TIMESTAMP_FORMAT))

    def to_dict(self):
        return {
            "player": self.player,
            "moves": self.moves,
            "difficulty": self.difficulty.label,
            "timestamp": self.timestamp,
        }

    @classmethod
    def from_dict(cls, data):
        return cls(
            player=clean_player_name(data.get("player")),
            moves=int(data["moves"]),
            difficulty=Difficulty.from_label(data.get("difficulty", Difficulty.EASY.label)),
            timestamp=str(data.get("timestamp", "")),
        )


# Kolejność: mniej ruchów, potem trudny przed łatwym, potem najnowsze
def _sort_key(entry):
    difficulty_order = {Difficulty.HARD: 0, Difficulty.EASY: 1}
    return (entry.moves, difficulty_order[entry.difficulty], _newest_first(entry.timestamp))


def _newest_first(timestamp):
    try:
        return -datetime.strptime(timestamp, TIMESTAMP_FORMAT).timestamp()
    except ValueError:
        return 0.0


class Leaderboard:
    """Best scores kept in a JSON list, saved after every new entry."""

    def __init__(self, path=SCORES_FILE):
        self.path = Path(path)
        self._entries = self._load()

    def _load(self):
        if not self.path.exists():
            return []
        try:
            with self.path.open("r", encoding="utf-8") as f:
                raw = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning("Could not read scores from %s: %s", self.path, e)
            return []
        if not isinstance(raw, list):
            logger.warning("Ignoring scores file %s: expected a list", self.path)
            return []
        entries = []
        for item in raw:
            try:
                entries.append(ScoreEntry.from_dict(item))
            except (AttributeError, KeyError, TypeError, ValueError):
                logger.warning("Skipping malformed score entry: %r", item)
        return entries

    def save(self):
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with self.path.open("w", encoding="utf-8") as f:
            json.dump([entry.to_dict() for entry in self._entries], f, indent=4, ensure_ascii=False)

    def add(self, entry):
        self._entries.append(entry)
        self.save()
        return entry

    def top(self, count=LEADERBOARD_TOP_N):
        return sorted(self._entries, key=_sort_key)[:count]

    def rank_of(self, entry):
        ordered = sorted(self._entries, key=_sort_key)
        for i, candidate in enumerate(ordered):
            if candidate is entry:
                return i + 1
        return None

    def __len__(self):
        return len(self._entries)
