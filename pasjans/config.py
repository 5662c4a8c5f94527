import configparser
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

SETTINGS_PATH = Path(__file__).with_name("settings.ini")
SCORES_FILE = "scores.json"
MAX_UNDO_HISTORY = 3
LEADERBOARD_TOP_N = 5
MAX_PLAYER_NAME = 15
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


# Poziom trudności: liczba kart dobieranych z talii naraz
class Difficulty(Enum):
    EASY = 1
    HARD = 3

    @property
    def draw_count(self):
        return self.value

    @property
    def label(self):
        return "łatwy" if self is Difficulty.EASY else "trudny"

    @classmethod
    def from_label(cls, label):
        for difficulty in cls:
            if difficulty.label == label:
                return difficulty
        raise ValueError(f"Unknown difficulty: {label!r}")


@dataclass(frozen=True)
class Settings:
    scores_file: str = SCORES_FILE
    undo_limit: int = MAX_UNDO_HISTORY
    leaderboard_top_n: int = LEADERBOARD_TOP_N
    log_level: str = "WARNING"


def _as_positive_int(raw, default):
    try:
        value = int(raw)
    except (TypeError, ValueError):
        return default
    return value if value > 0 else default


# Wczytuje ustawienia z pliku ini, błędne wartości zastępuje domyślnymi
def load_settings(path=SETTINGS_PATH):
    defaults = Settings()
    path = Path(path)
    if not path.exists():
        return defaults
    parser = configparser.ConfigParser()
    try:
        parser.read(path, encoding="utf-8")
    except configparser.Error:
        return defaults
    if "pasjans" not in parser:
        return defaults
    section = parser["pasjans"]

    log_level = section.get("log_level", defaults.log_level).strip().upper()
    if log_level not in LOG_LEVELS:
        log_level = defaults.log_level

    return Settings(
        scores_file=section.get("scores_file", defaults.scores_file).strip() or defaults.scores_file,
        undo_limit=_as_positive_int(section.get("undo_limit"), defaults.undo_limit),
        leaderboard_top_n=_as_positive_int(section.get("leaderboard_top_n"), defaults.leaderboard_top_n),
        log_level=log_level,
    )
