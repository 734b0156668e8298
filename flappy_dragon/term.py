import sys
import math
import time
import termios
import tty
from rich.console import Console
from rich.live import Live

from flappy_dragon import ui
from flappy_dragon.config import SCREEN_WIDTH, SCREEN_HEIGHT, TITLE, BLACK, WHITE, SPRITE_GLYPHS
from flappy_dragon.input_handler import InputHandler, KeyBindings
from flappy_dragon.log import log

class BackendInitError(RuntimeError):
    """The terminal could not be switched into game mode."""

def to_char(glyph):
    """CP437 code (or a literal string) -> printable character."""
    if isinstance(glyph, str):
        return glyph[:1] or " "
    if glyph < 32 or glyph > 255:
        return "?"
    return bytes([glyph]).decode("cp437")

def sprite_char(index):
    return SPRITE_GLYPHS.get(index) or to_char(index)

class Sprite:
    def __init__(self, pos, z_order, angle, scale, fg, bg, glyph):
        self.pos = pos
        self.z_order = z_order
        self.angle = angle
        self.scale = scale
        self.fg = fg
        self.bg = bg
        self.glyph = glyph

    def footprint(self):
        x0, y0 = math.floor(self.pos[0]), math.floor(self.pos[1])
        w = max(1, math.ceil(self.scale[0]))
        h = max(1, math.ceil(self.scale[1]))
        for dy in range(h):
            for dx in range(w):
                yield x0 + dx, y0 + dy

class Layer:
    """
    A width x height grid of (char, fg, bg) cells plus free-positioned sprites.
    Transparent layers start out as None cells so lower layers show through.
    """
    def __init__(self, width, height, transparent=False):
        self.width = width
        self.height = height
        self.transparent = transparent
        self.cls()

    def _in_bounds(self, x, y):
        return 0 <= x < self.width and 0 <= y < self.height

    def cls(self):
        blank = None if self.transparent else (" ", WHITE, BLACK)
        self.cells = [[blank] * self.width for _ in range(self.height)]
        self.sprites = []

    def cls_bg(self, color):
        self.cells = [[(" ", WHITE, color)] * self.width for _ in range(self.height)]
        self.sprites = []

    def set(self, x, y, fg, bg, glyph):
        if self._in_bounds(x, y):
            self.cells[y][x] = (to_char(glyph), fg, bg)

    def print(self, x, y, text, fg=WHITE):
        for i, ch in enumerate(text):
            cx = x + i
            if not self._in_bounds(cx, y): continue
            # keep whatever background is already there
            old = self.cells[y][cx]
            bg = old[2] if old else BLACK
            self.cells[y][cx] = (ch, fg, bg)

    def add_sprite(self, sprite):
        self.sprites.append(sprite)

    def flatten(self):
        grid = [row[:] for row in self.cells]
        for sprite in sorted(self.sprites, key=lambda s: s.z_order):
            ch = sprite_char(sprite.glyph)
            for x, y in sprite.footprint():
                if self._in_bounds(x, y):
                    grid[y][x] = (ch, sprite.fg, sprite.bg)
        return grid

class Term:
    """
    Terminal render backend: two layers (0 = text console, 1 = sprites),
    per-frame timing and key polling, drawn through a rich Live display.
    """
    def __init__(self, width=SCREEN_WIDTH, height=SCREEN_HEIGHT, bindings=None,
                 title=TITLE, console=None, stdin=None):
        self.width = width
        self.height = height
        self.title = title
        self.bindings = bindings or KeyBindings()
        self.console = console or Console()
        self.stdin = stdin or sys.stdin
        self.layers = [Layer(width, height), Layer(width, height, transparent=True)]
        self.active = 0

        self.frame_time_ms = 0.0
        self.key = None
        self.quitting = False

        self._last_frame = None
        self._live = None
        self._old_settings = None

    # --- Drawing API ---
    def set_active_console(self, index):
        self.active = index

    def cls(self):
        self.layers[self.active].cls()

    def cls_bg(self, color):
        self.layers[self.active].cls_bg(color)

    def print(self, x, y, text):
        self.layers[self.active].print(x, y, text)

    def print_centered(self, y, text):
        self.print((self.width - len(text)) // 2, y, text)

    def set(self, x, y, fg, bg, glyph):
        self.layers[self.active].set(x, y, fg, bg, glyph)

    def set_fancy(self, pos, z_order, angle, scale, fg, bg, glyph):
        self.layers[self.active].add_sprite(Sprite(pos, z_order, angle, scale, fg, bg, glyph))

    def composite(self):
        """Flatten all layers, upper layers win where they are not transparent."""
        grid = self.layers[0].flatten()
        for layer in self.layers[1:]:
            for y, row in enumerate(layer.flatten()):
                for x, cell in enumerate(row):
                    if cell is not None:
                        grid[y][x] = cell
        return grid

    def quit(self):
        self.quitting = True

    # --- Terminal lifecycle ---
    def __enter__(self):
        try:
            if not self.stdin.isatty():
                raise BackendInitError("stdin is not a terminal")
            fd = self.stdin.fileno()
            self._old_settings = termios.tcgetattr(fd)
            # no echo, no line buffering
            tty.setcbreak(fd)
        except (termios.error, OSError, ValueError) as e:
            self._restore_terminal()
            raise BackendInitError(f"cannot set up terminal: {e}") from e

        try:
            self._live = Live(console=self.console, transient=True, auto_refresh=False)
            self._live.start()
        except BaseException:
            # __exit__ won't run if we fail here
            self._live = None
            self._restore_terminal()
            raise
        self._last_frame = None
        log("[dim]🖥️ Terminal ready ({}x{})[/]", self.width, self.height)
        return self

    def __exit__(self, exc_type, exc, tb):
        if self._live:
            self._live.stop()
            self._live = None
        self._restore_terminal()
        return False

    def _restore_terminal(self):
        if self._old_settings is None:
            return
        fd = self.stdin.fileno()
        termios.tcsetattr(fd, termios.TCSADRAIN, self._old_settings)
        try: termios.tcflush(fd, termios.TCIFLUSH)
        except termios.error: pass
        self._old_settings = None

    # --- Per-frame ---
    def begin_frame(self, now=None):
        now = time.perf_counter() if now is None else now
        if self._last_frame is None:
            self.frame_time_ms = 0.0
        else:
            self.frame_time_ms = (now - self._last_frame) * 1000.0
        self._last_frame = now
        self.key = self.bindings.lookup(InputHandler.get_key(self.stdin))

    def present(self):
        if self._live:
            self._live.update(ui.compose(self), refresh=True)

def main_loop(term, state, fps=60):
    """Drive state.tick(term) once per frame until the game asks to quit."""
    frame_budget = 1.0 / max(1, fps)
    with term:
        while not term.quitting:
            started = time.perf_counter()
            term.begin_frame()
            state.tick(term)
            term.present()

            elapsed = time.perf_counter() - started
            if elapsed < frame_budget:
                time.sleep(frame_budget - elapsed)
