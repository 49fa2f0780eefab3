import random
from typing import List, Optional

from config.constants import UI_CONFIG


def make_leaderboard(rng: Optional[random.Random] = None) -> List[int]:
    """Decorative scores for the page footer. Unrelated to any evaluation."""
    rng = rng or random.Random()
    return [rng.randrange(UI_CONFIG.LEADERBOARD_MAX_SCORE) for _ in range(UI_CONFIG.LEADERBOARD_SIZE)]
