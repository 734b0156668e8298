import os
import sys
import select
from enum import Enum
from flappy_dragon.log import log

class Signal(Enum):
    PLAY = "play"
    QUIT = "quit"
    FLAP = "flap"

# --- 🎮 Non-blocking key polling ---
class InputHandler:
    @staticmethod
    def get_key(stream=None):
        """
        Check for a pending key press without blocking.
        Returns a single lower-cased character, or None.
        """
        stream = stream or sys.stdin
        try:
            dr, dw, de = select.select([stream], [], [], 0)
            if dr:
                # raw fd read: a buffered read would hide the next key from select
                key = os.read(stream.fileno(), 1).decode("utf-8", "ignore").lower()
                if key in ['\n', '\r', '']: return None
                return key
        except (OSError, ValueError):
            pass
        return None

class KeyBindings:
    """Maps raw keys to game signals."""
    def __init__(self):
        self.keys = {}

    def bind(self, key, signal):
        self.keys[key.lower()] = signal

    def lookup(self, key):
        if not key:
            return None
        return self.keys.get(key.lower())

    def key_for(self, signal):
        return next((k for k, s in self.keys.items() if s is signal), None)

    @classmethod
    def from_config(cls, key_prefs):
        bindings = cls()
        for name, key in key_prefs.items():
            try:
                signal = Signal(name.lower())
            except ValueError:
                log(f"[yellow]⚠️ Unknown key binding '{name}', ignored[/]")
                continue
            if not isinstance(key, str) or len(key) != 1:
                log(f"[yellow]⚠️ Binding for '{name}' must be a single key, got {key!r}[/]")
                continue
            bindings.bind(key, signal)
        return bindings
