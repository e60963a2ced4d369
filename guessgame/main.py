'''
Guess the Number (console)

Run:
  guessgame                  -> installed console script
  python -m guessgame.main   -> from a checkout

Startup:
1) read settings (env / .env)
2) set up logging on stderr so it stays out of the game text
3) load the high-score file once and hand the store to the controller
'''

import logging
import sys
from functools import partial

from .config import Settings, load_settings
from .console import Console
from .controller import FAREWELL_MESSAGE, GameController
from .random_client import draw_secret
from .store import HighScoreStore

logger = logging.getLogger(__name__)

def build_controller(settings: Settings, console: Console) -> GameController:
    store = HighScoreStore(settings.highscores_path)
    store.load()
    draw = partial(draw_secret, use_random_org=settings.use_random_org)
    return GameController(store, console, draw)

def main() -> int:
    try:
        settings = load_settings()
        bad_settings = None
    except ValueError as error:
        settings = Settings()
        bad_settings = error

    logging.basicConfig(
        level=settings.logging_level,
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )
    if bad_settings is not None:
        logger.warning("Invalid settings, using defaults: %s", bad_settings)

    console = Console()
    controller = build_controller(settings, console)

    try:
        controller.run()
    except (EOFError, KeyboardInterrupt):
        # input closed or Ctrl-C at a prompt
        console.say()
        console.say(FAREWELL_MESSAGE)
    return 0

if __name__ == "__main__":
    sys.exit(main())
