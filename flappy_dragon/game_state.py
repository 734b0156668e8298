from enum import Enum

from flappy_dragon import ui
from flappy_dragon.config import SCREEN_WIDTH, SCREEN_HEIGHT, FRAME_DURATION, NAVY
from flappy_dragon.input_handler import Signal
from flappy_dragon.log import log
from flappy_dragon.obstacle import new_obstacle
from flappy_dragon.player import Player

START_POS = (5, 25)
RESTART_POS = (2, 25)

# shown when the backend has no binding for a signal
DEFAULT_KEYS = {
    Signal.PLAY: "p",
    Signal.QUIT: "q",
    Signal.FLAP: " ",
}

def key_label(ctx, signal):
    key = ctx.bindings.key_for(signal) or DEFAULT_KEYS[signal]
    return ui.key_label(key)

class GameMode(Enum):
    MENU = "menu"
    PLAYING = "playing"
    END = "end"

class State:
    """
    Everything the game owns: the player, the single active obstacle,
    the score and the current screen. ctx is the render backend.
    """
    def __init__(self, rng=None):
        self.rng = rng
        self.player = Player(*START_POS)
        self.frame_time = 0.0
        self.obstacle = new_obstacle(SCREEN_WIDTH, 0, self.rng)
        self.mode = GameMode.MENU
        self.score = 0
        self.handlers = {
            GameMode.MENU: self.main_menu,
            GameMode.PLAYING: self.play,
            GameMode.END: self.dead,
        }

    def tick(self, ctx):
        self.handlers[self.mode](ctx)

    # --- Screens ---
    def main_menu(self, ctx):
        ctx.cls()
        ctx.print_centered(5, "Welcome to Flappy Dragon")
        ctx.print_centered(8, f"({key_label(ctx, Signal.PLAY)}) Play Game")
        ctx.print_centered(9, f"({key_label(ctx, Signal.QUIT)}) Quit Game")

        if ctx.key is Signal.PLAY:
            self.mode = GameMode.PLAYING
            log("[green]▶ Game started[/]")
        elif ctx.key is Signal.QUIT:
            ctx.quit()

    def play(self, ctx):
        ctx.cls_bg(NAVY)
        self.frame_time += ctx.frame_time_ms

        if self.frame_time >= FRAME_DURATION:
            self.frame_time = 0.0
            self.player.apply_gravity_and_move()

        if ctx.key is Signal.FLAP:
            self.player.flap()

        ctx.set_active_console(1)
        ctx.cls()
        self.player.render(ctx)
        ctx.set_active_console(0)

        ctx.print(0, 0, f"Press {key_label(ctx, Signal.FLAP)} to flap")
        ctx.print(0, 1, f"Score: {self.score}")

        self.obstacle.render(ctx, self.player.x)

        if self.player.x > self.obstacle.x:
            self.score += 1
            self.obstacle = new_obstacle(self.player.x + SCREEN_WIDTH, self.score, self.rng)

        if self.player.y > SCREEN_HEIGHT or self.obstacle.hit_obstacle(self.player):
            self.mode = GameMode.END
            log("[red]💥 Crashed at x={} with {} points[/]", self.player.x, self.score)

    def dead(self, ctx):
        # the sprite layer still holds the last dragon frame
        ctx.set_active_console(1)
        ctx.cls()
        ctx.set_active_console(0)

        ctx.cls()
        ctx.print_centered(5, "You are dead!")
        ctx.print_centered(6, f"You earned {self.score} points")
        ctx.print_centered(8, f"({key_label(ctx, Signal.PLAY)}) Play Again")
        ctx.print_centered(9, f"({key_label(ctx, Signal.QUIT)}) Quit Game")

        if ctx.key is Signal.PLAY:
            self.restart()
        elif ctx.key is Signal.QUIT:
            ctx.quit()

    def restart(self):
        self.player = Player(*RESTART_POS)
        self.frame_time = 0.0
        self.mode = GameMode.PLAYING
        self.obstacle = new_obstacle(SCREEN_WIDTH, 0, self.rng)
        self.score = 0
        log("[yellow]🔄 Restarted[/]")
