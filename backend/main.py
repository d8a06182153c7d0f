import time
import json
import uuid
import random
import logging
import argparse
from typing import Any, Dict, Optional

from dotenv import load_dotenv

from domain.constants import GRID_SIZE
from domain.game_loop import GameLoop
from domain.game_state import GameSnapshot, GameState
from players.base import Player
from players.random_player import RandomPlayer
from services.scoreboard import DEFAULT_PLAYER_NAME, make_score_reporter

logger = logging.getLogger(__name__)


class SnakeGame:
    """
    One game session. Owns the GameState and swaps it out wholesale on restart.

    Manages:
      - The GameLoop (rules, food, speed)
      - The current GameState
      - When the session was last used
    """

    def __init__(
        self,
        grid_size: int = GRID_SIZE,
        player_name: str = DEFAULT_PLAYER_NAME,
        game_id: Optional[str] = None,
        loop: Optional[GameLoop] = None
    ):
        self.game_id = game_id or str(uuid.uuid4())
        self.player_name = player_name
        self.loop = loop if loop is not None else GameLoop(grid_size=grid_size)
        self.state: GameState = self.loop.start()
        self.start_time = time.time()
        self.last_active = self.start_time

    @property
    def game_over(self) -> bool:
        return self.state.is_terminal

    def request_direction(self, direction) -> bool:
        self.last_active = time.time()
        return self.loop.request_direction(self.state, direction)

    def tick(self) -> GameSnapshot:
        """Advance one step and return the new snapshot."""
        self.last_active = time.time()
        self.loop.tick(self.state)
        return self.state.snapshot()

    def restart(self, grid_size: Optional[int] = None) -> GameSnapshot:
        self.state = self.loop.restart(grid_size)
        self.start_time = time.time()
        self.last_active = self.start_time
        return self.state.snapshot()

    def snapshot(self) -> GameSnapshot:
        return self.state.snapshot()

    def run(
        self,
        player: Player,
        max_ticks: Optional[int] = None,
        realtime: bool = True,
        show_board: bool = True
    ) -> Dict[str, Any]:
        """
        Play until the game ends, letting `player` pick each move.

        Sleeps `speed_ms` between ticks when `realtime` is set, re-reading it
        after every tick because eating food speeds the game up.
        """
        while not self.game_over:
            if max_ticks is not None and self.state.tick_count >= max_ticks:
                print(f"Stopped after {max_ticks} ticks.")
                break

            move = player.get_move(self.snapshot())
            if move is not None:
                self.request_direction(move)

            snapshot = self.tick()
            if show_board:
                print("\n" + snapshot.print_board() + "\n")
                print(f"Tick {snapshot.tick_count} | Score: {snapshot.score} | Speed: {snapshot.speed_ms}ms")

            if realtime and not self.game_over:
                time.sleep(snapshot.speed_ms / 1000)

        return self.summary()

    def summary(self) -> Dict[str, Any]:
        state = self.state
        return {
            "game_id": self.game_id,
            "player_name": self.player_name,
            "status": state.status.value,
            "final_score": state.score,
            "length": len(state.snake),
            "ticks": state.tick_count,
            "collision": state.last_collision.value,
            "duration_s": round(time.time() - self.start_time, 2),
        }


# -------------------------------
# Example Usage (Main Entry Point)
# -------------------------------
def main():
    load_dotenv()

    parser = argparse.ArgumentParser(
        description="Run a Snake game in the terminal, steered by the random autopilot."
    )
    parser.add_argument("--grid-size", type=int, default=GRID_SIZE,
                        help="Board is N x N cells")
    parser.add_argument("--player-name", type=str, default=DEFAULT_PLAYER_NAME,
                        help="Name used when submitting the score")
    parser.add_argument("--max-ticks", type=int, default=None,
                        help="Stop after this many ticks")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for food placement and autopilot moves")
    parser.add_argument("--submit", action="store_true",
                        help="POST the final score to SNAKE_BACKEND_URL")
    parser.add_argument("--fast", action="store_true",
                        help="Don't wait between ticks")
    parser.add_argument("--quiet", action="store_true",
                        help="Only print the summary")

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.WARNING if args.quiet else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    rng = random.Random(args.seed)
    loop = GameLoop(grid_size=args.grid_size, rng=rng)
    if args.submit:
        loop.add_game_over_listener(make_score_reporter(args.player_name))

    game = SnakeGame(grid_size=args.grid_size, player_name=args.player_name, loop=loop)
    result = game.run(
        RandomPlayer(rng=rng),
        max_ticks=args.max_ticks,
        realtime=not args.fast,
        show_board=not args.quiet
    )

    print("\nGame Summary:")
    print(json.dumps(result, indent=2))


if __name__ == "__main__":
    main()
