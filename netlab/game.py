"""A one-button flying game on a text console."""

from __future__ import annotations

import argparse
import contextlib
import random
import sys
import time
from dataclasses import dataclass, field
from enum import Enum, auto

SCREEN_WIDTH = 80
SCREEN_HEIGHT = 50
FRAME_DURATION = 75.0


class GameMode(Enum):
    """The screen the game is showing."""

    MENU = auto()
    PLAYING = auto()
    END = auto()


class Console:
    """A grid of characters the game draws onto."""

    def __init__(self, width: int = SCREEN_WIDTH, height: int = SCREEN_HEIGHT) -> None:
        self.width = width
        self.height = height
        self.quitting = False
        self._cells = [[" "] * width for _ in range(height)]

    def cls(self) -> None:
        """Clear every cell."""
        for row in self._cells:
            row[:] = [" "] * self.width

    def set(self, x: int, y: int, glyph: str) -> None:
        """Put a glyph at (x, y); positions off the screen are ignored."""
        if 0 <= x < self.width and 0 <= y < self.height:
            self._cells[y][x] = glyph

    def print(self, x: int, y: int, text: str) -> None:
        """Write text starting at (x, y)."""
        for offset, char in enumerate(text):
            self.set(x + offset, y, char)

    def print_centered(self, y: int, text: str) -> None:
        """Write text horizontally centred on row y."""
        self.print(self.width // 2 - len(text) // 2, y, text)

    def row(self, y: int) -> str:
        """Return the characters of row y."""
        return "".join(self._cells[y])


@dataclass
class Player:
    """The flyer; x is its position in the world, y its row on screen."""

    x: int
    y: int
    velocity: float = 0.0

    def gravity_and_move(self) -> None:
        """Fall a little faster, move one step right, and stay below the top."""
        if self.velocity < 2.0:
            self.velocity += 0.2
        self.y += int(self.velocity)
        self.x += 1
        if self.y < 0:
            self.y = 0

    def flap(self) -> None:
        """Give the player an upward kick."""
        self.velocity = -2.0

    def render(self, console: Console) -> None:
        """Draw the player in the leftmost column."""
        console.set(0, self.y, "@")


@dataclass
class Obstacle:
    """A wall with a gap of the given size centred on gap_y."""

    x: int
    gap_y: int
    size: int

    @classmethod
    def create(cls, x: int, score: int, rng: random.Random) -> Obstacle:
        """Place a wall at x; the gap shrinks as the score grows, down to 2."""
        return cls(x=x, gap_y=rng.randrange(10, 40), size=max(2, 20 - score))

    def render(self, console: Console, player_x: int) -> None:
        """Draw the wall relative to the player's position."""
        screen_x = self.x - player_x
        half_size = self.size // 2
        for y in range(0, self.gap_y - half_size):
            console.set(screen_x, y, "|")
        for y in range(self.gap_y + half_size, SCREEN_HEIGHT):
            console.set(screen_x, y, "|")

    def hit_obstacle(self, player: Player) -> bool:
        """Return whether the player is in the wall's column outside the gap."""
        half_size = self.size // 2
        above_gap = player.y < self.gap_y - half_size
        below_gap = player.y > self.gap_y + half_size
        return player.x == self.x and (above_gap or below_gap)


@dataclass
class State:
    """The whole game: mode, player, current wall and score."""

    rng: random.Random = field(default_factory=random.Random)
    mode: GameMode = field(init=False)
    player: Player = field(init=False)
    frame_time: float = field(init=False)
    obstacle: Obstacle = field(init=False)
    score: int = field(init=False)

    def __post_init__(self) -> None:
        self._reset()
        self.mode = GameMode.MENU

    def _reset(self) -> None:
        self.player = Player(5, 25)
        self.frame_time = 0.0
        self.obstacle = Obstacle.create(SCREEN_WIDTH, 0, self.rng)
        self.score = 0

    def restart(self) -> None:
        """Start a new round."""
        self._reset()
        self.mode = GameMode.PLAYING

    def tick(self, console: Console, key: str | None, frame_time_ms: float) -> None:
        """Advance one frame given the key pressed, if any, and the elapsed time."""
        if self.mode is GameMode.MENU:
            self._main_menu(console, key)
        elif self.mode is GameMode.PLAYING:
            self._play(console, key, frame_time_ms)
        else:
            self._dead(console, key)

    def _menu_keys(self, console: Console, key: str | None) -> None:
        choice = key.lower() if key else None
        if choice == "p":
            self.restart()
        elif choice == "q":
            console.quitting = True

    def _main_menu(self, console: Console, key: str | None) -> None:
        console.cls()
        console.print_centered(5, "Welcome to rust game!")
        console.print_centered(8, "(P) Play again?")
        console.print_centered(9, "(Q) Quit? ")
        self._menu_keys(console, key)

    def _dead(self, console: Console, key: str | None) -> None:
        console.cls()
        console.print_centered(5, "You are dead!")
        console.print_centered(6, f"You score {self.score} .")
        console.print_centered(8, "(P) Play again?")
        console.print_centered(9, "(Q) Quit? ")
        self._menu_keys(console, key)

    def _play(self, console: Console, key: str | None, frame_time_ms: float) -> None:
        console.cls()
        self.frame_time += frame_time_ms
        if self.frame_time > FRAME_DURATION:
            self.frame_time = 0.0
            self.player.gravity_and_move()
        if key == " ":
            self.player.flap()
        self.player.render(console)
        console.print(0, 0, "Press SPACE to play!")
        console.print(0, 1, f"Score: {self.score}")
        self.obstacle.render(console, self.player.x)
        if self.player.x > self.obstacle.x:
            self.score += 1
            self.obstacle = Obstacle.create(self.player.x + SCREEN_WIDTH, self.score, self.rng)
        if self.player.y > SCREEN_HEIGHT or self.obstacle.hit_obstacle(self.player):
            self.mode = GameMode.END


def _run_terminal(state: State) -> None:
    import curses

    def loop(screen) -> None:
        with contextlib.suppress(curses.error):
            curses.curs_set(0)
        screen.nodelay(True)
        console = Console()
        last = time.monotonic()
        while not console.quitting:
            code = screen.getch()
            key = chr(code) if 0 <= code < 256 else None
            now = time.monotonic()
            state.tick(console, key, (now - last) * 1000.0)
            last = now
            rows, cols = screen.getmaxyx()
            for y in range(min(rows, console.height)):
                with contextlib.suppress(curses.error):
                    screen.addstr(y, 0, console.row(y)[: max(cols - 1, 0)])
            screen.refresh()
            time.sleep(1 / 60)

    curses.wrapper(loop)


def main(argv: list[str] | None = None) -> int:
    """Play the game in the terminal."""
    parser = argparse.ArgumentParser(description="Flap through the gaps in the walls")
    parser.add_argument("--seed", type=int, default=None, help="seed for the wall positions")
    args = parser.parse_args(argv)
    _run_terminal(State(random.Random(args.seed)))
    return 0


if __name__ == "__main__":
    sys.exit(main())