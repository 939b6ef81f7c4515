import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

DEFAULT_MODEL_NAME = "spelling.model"
DEFAULT_RESOURCE_DIR = Path(__file__).resolve().parents[1] / "resources"


def _optional(name: str) -> str | None:
    value = os.getenv(name, "").strip()
    return value or None


@dataclass(frozen=True)
class Settings:
    model_name: str = field(default_factory=lambda: os.getenv("SPELLING_MODEL_NAME", DEFAULT_MODEL_NAME))
    industry_model_name: str | None = field(default_factory=lambda: _optional("SPELLING_INDUSTRY_MODEL_NAME"))
    resource_dir: Path = field(
        default_factory=lambda: Path(os.getenv("SPELLING_RESOURCE_DIR", str(DEFAULT_RESOURCE_DIR)))
    )


settings = Settings()
