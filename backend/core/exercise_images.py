"""
Keyword-based image lookup for workout and exercise cards.

Workout and exercise names are free text (mostly Portuguese, e.g.
"Treino de Pernas", "Supino Inclinado"). The card image is picked by
matching the name against a keyword table in
shared/dictionaries/exercise_images.yaml.
"""
import pathlib
import unicodedata
from functools import lru_cache
from typing import Dict, Optional

import yaml

ROOT = pathlib.Path(__file__).resolve().parents[2]
IMAGES_PATH = ROOT / "shared/dictionaries/exercise_images.yaml"

# Substring matches of a name inside a keyword only count for longer keywords.
MIN_KEYWORD_LENGTH_FOR_PARTIAL = 4


@lru_cache
def load_image_map() -> Dict[str, str]:
    """Keyword table, in file order, plus the "default" entry."""
    data = yaml.safe_load(IMAGES_PATH.read_text(encoding="utf-8"))
    images = dict(data["images"])
    images["default"] = data["default"]
    return images


def normalize_name(name: str) -> str:
    """Lowercase and strip accents ("Elevação" -> "elevacao")."""
    decomposed = unicodedata.normalize("NFD", name.lower())
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch))


def get_exercise_image(name: Optional[str]) -> str:
    """
    Get the image URL for a workout or exercise name.

    Tries, in order:
    1. The normalized name equals a keyword
    2. A keyword appears inside the name
    3. The name appears inside a keyword of 4+ characters

    Args:
        name: Workout or exercise name

    Returns:
        Image URL; the default image when nothing matches
    """
    images = load_image_map()
    if not name:
        return images["default"]

    normalized = normalize_name(name)
    keywords = [(k, url) for k, url in images.items() if k != "default"]

    for keyword, url in keywords:
        if normalized == keyword:
            return url

    for keyword, url in keywords:
        if keyword in normalized:
            return url

    for keyword, url in keywords:
        if len(keyword) >= MIN_KEYWORD_LENGTH_FOR_PARTIAL and normalized in keyword:
            return url

    return images["default"]
