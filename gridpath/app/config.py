import sys
from pathlib import Path
from typing import List, Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from gridpath.core.state import GameOptions

BASE_DIR = Path(__file__).resolve().parents[2]


class Settings(BaseSettings):  # GRIDPATH_* env vars, then .env
    """Front-end settings."""
    MODE: Literal["sandbox", "challenge"] = "challenge"
    DIFFICULTY: Literal["easy", "medium", "hard"] = "medium"
    LEVEL: int = Field(default=1, ge=1)
    WIDTH: Optional[int] = Field(default=None, ge=1)
    HEIGHT: Optional[int] = Field(default=None, ge=1)
    ALGORITHM: Literal["bfs", "dijkstra", "astar"] = "astar"
    SEED: Optional[int] = None          # maze generation seed
    CELL_SIZE: int = Field(default=24, ge=8)
    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="GRIDPATH_",
        env_file=BASE_DIR / ".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    def game_options(self) -> GameOptions:
        return GameOptions(
            width=self.WIDTH,
            height=self.HEIGHT,
            difficulty=self.DIFFICULTY,
            level=self.LEVEL,
            mode=self.MODE,
        )


def argv_overrides(argv: List[str]) -> dict:
    """Pick up --mode=, --level=, --difficulty=, --algorithm=, --seed= style flags."""
    out = {}
    for arg in argv:
        if not arg.startswith("--") or "=" not in arg:
            continue
        key, value = arg[2:].split("=", 1)
        key = key.replace("-", "_").upper()
        if key in Settings.model_fields:
            out[key] = value
    return out


def load_settings(argv: Optional[List[str]] = None) -> Settings:
    return Settings(**argv_overrides(sys.argv[1:] if argv is None else argv))
