"""
- Secret number source with clear fallback
By default we draw from Python's secure random (secrets). When enabled in the
settings we ask random.org instead; if anything goes wrong there (no internet,
timeout, bad response) we fall back to secrets so the game still works.
"""

import logging
import requests
from secrets import randbelow

logger = logging.getLogger(__name__)

RANDOM_URL = "https://www.random.org/integers/"

def _local_draw(upper_bound: int) -> int:
    # randbelow(n) gives 0 -> n-1, shift it into 1 -> n
    return randbelow(upper_bound) + 1

def fetch_number(upper_bound: int) -> int:
    """Ask random.org for one integer in 1..upper_bound, with a secure local fallback."""
    params = {
        "num": 1,
        "min": 1,
        "max": upper_bound,
        "col": 1,
        "base": 10,
        "format": "plain",
        "rnd": "new",
    }

    # keep network quick; if it takes too long, we will just fallback
    timeout_seconds = 3.0

    try:
        response = requests.get(RANDOM_URL, params=params, timeout=timeout_seconds)
        response.raise_for_status()

        # The body looks like: "42\n"
        value = int(response.text.strip())
        if value < 1 or value > upper_bound:
            raise ValueError(f"random.org number {value} out of range 1..{upper_bound}.")
        return value

    except (requests.RequestException, ValueError) as error:
        logger.info("random.org unavailable (%s); using local generator", error)
        return _local_draw(upper_bound)

def draw_secret(upper_bound: int, use_random_org: bool = False) -> int:
    if upper_bound < 1:
        raise ValueError("upper_bound must be positive.")
    if use_random_org:
        return fetch_number(upper_bound)
    return _local_draw(upper_bound)
