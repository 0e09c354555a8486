"""
Play the invaders simulation with the keyboard

    python -m invaders.play [--seed N] [--restart-with-intro]

Left/A and Right/D move, Space fires (or continues between levels), Escape quits.
"""

import argparse
from typing import Optional, Set

import arcade

from .game import InvadersGame
from .state import Command
from .window import InvadersWindow

MOVE_KEYS = {
    arcade.key.LEFT: Command.MOVE_LEFT,
    arcade.key.A: Command.MOVE_LEFT,
    arcade.key.RIGHT: Command.MOVE_RIGHT,
    arcade.key.D: Command.MOVE_RIGHT,
}


class PlayWindow(InvadersWindow):
    """Keyboard input layer: turns key state into one command set per tick"""

    def __init__(self, game: InvadersGame):
        super().__init__(update_rate=1 / 60)
        self.game = game
        self.held: Set[int] = set()
        self.advance_pressed = False
        self.snapshot = game.snapshot()

    def on_key_press(self, symbol: int, modifiers: int):
        if symbol == arcade.key.ESCAPE:
            self.close()
        elif symbol == arcade.key.SPACE:
            # edge triggered: one press, one advance
            self.advance_pressed = True
        else:
            self.held.add(symbol)

    def on_key_release(self, symbol: int, modifiers: int):
        self.held.discard(symbol)

    def on_update(self, delta_time: float):
        commands = {MOVE_KEYS[k] for k in self.held if k in MOVE_KEYS}
        if self.advance_pressed:
            commands.add(Command.ADVANCE)
            self.advance_pressed = False
        self.snapshot = self.game.tick(commands)


def main(argv: Optional[list] = None):
    parser = argparse.ArgumentParser(description="Play Invaders - Multi-Level Edition")
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for enemy fire selection (default: random)",
    )
    parser.add_argument(
        "--restart-with-intro",
        action="store_true",
        help="Show the level intro after a game over instead of restarting straight into play",
    )
    args = parser.parse_args(argv)

    print("=== Invaders - Multi-Level Edition ===")
    game = InvadersGame(seed=args.seed, restart_with_intro=args.restart_with_intro)
    PlayWindow(game)
    arcade.run()

    snap = game.snapshot()
    print(f"Game ended. Final score: {snap.score} Level: {snap.level}")


if __name__ == "__main__":
    main()
