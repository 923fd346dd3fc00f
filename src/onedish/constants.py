"""Constants and environment-driven settings for the onedish package."""

import os
from typing import List

from dotenv import load_dotenv

load_dotenv()

# Server
HOST: str = os.getenv("HOST", "0.0.0.0")
PORT: int = int(os.getenv("PORT", "3001"))
ALLOWED_ORIGINS: List[str] = [
    origin.strip()
    for origin in os.getenv("ALLOWED_ORIGINS", "http://localhost:3000").split(",")
    if origin.strip()
]
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

if LOG_LEVEL not in ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]:
    raise ValueError(f"Unsupported LOG_LEVEL: {LOG_LEVEL}. Must be one of: DEBUG, INFO, WARNING, ERROR, CRITICAL")


def _parse_serving_choices(raw: str) -> List[int]:
    choices = []
    for part in raw.split(","):
        part = part.strip()
        if not part:
            continue
        if not part.isdigit() or int(part) <= 0:
            raise ValueError(f"Invalid SERVING_CHOICES entry: {part!r}. Must be positive integers")
        choices.append(int(part))
    if not choices:
        raise ValueError("SERVING_CHOICES must contain at least one serving count")
    return choices


# Serving counts offered to users when they pick a target
SERVING_CHOICES: List[int] = _parse_serving_choices(os.getenv("SERVING_CHOICES", "1,2"))
DEFAULT_TARGET_SERVINGS: int = 1

# Scaling engine
EPSILON: float = 1e-6
BAKING_CAUTION_FACTOR: float = 0.5
STRUCTURAL_WARNING_RATIO: float = 0.25
