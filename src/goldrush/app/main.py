"""
Gold Rush - collect every gold piece on a single screen of girders and ladders.

Usage:
    goldrush

Controls:
    Arrow keys / WASD - move, climb ladders
    R                 - reset the level
"""
import logging

from goldrush import config
from goldrush.app.game_app import GameApp


def main():
    """Main entry point."""
    logging.basicConfig(
        level=config.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    config.validate()

    app = GameApp()
    app.run()


if __name__ == "__main__":
    main()
