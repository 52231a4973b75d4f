from __future__ import annotations

from .models import RecommendedItem

MISSING_CALORIES = -1


def _flag(value: bool | None) -> str:
    return "true" if value else "false"


def format_header(hall_id: int) -> str:
    return f"Top recommendations for hall_id={hall_id}:"


def format_item(item: RecommendedItem) -> str:
    """Render one recommendation; null calories/diet flags show as -1/false."""
    kcal = item.calories if item.calories is not None else MISSING_CALORIES
    return (
        f"- {item.name}"
        f" | score={item.score:g}"
        f" | kcal={kcal}"
        f" | vegan={_flag(item.vegan)}"
        f" | veg={_flag(item.vegetarian)}"
    )
