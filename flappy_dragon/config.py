import os
import sys
import json
from flappy_dragon.log import log

TILE_SIZE = 16
SCREEN_WIDTH = 1280 // TILE_SIZE
SCREEN_HEIGHT = 720 // TILE_SIZE
FRAME_DURATION = 16.66  # ms of accumulated frame time per physics tick

TITLE = "Flappy Dragon"
CONFIG_PATH = "./config.json"

# rich accepts hex colors directly
NAVY = "#000080"
GRAY = "#808080"
BLACK = "#000000"
WHITE = "#ffffff"

# Sprite sheet index -> terminal glyph for the dragon frames
SPRITE_GLYPHS = {
    64: "@",
    1: ">",
    2: "=",
    3: "<",
}

PREF_DEFAULTS = {
    "fps": 60,
    "verbose": False,
    "keys": {
        "play": "p",
        "quit": "q",
        "flap": " ",
    },
}

def load_config(path=CONFIG_PATH):
    if not os.path.exists(path):
        config = {}
    else:
        with open(path, "r", encoding="utf-8") as f:
            try:
                config = json.load(f)
            except json.JSONDecodeError:
                log(f"[bold red]❌ ERROR[/] {path} is corrupted!")
                sys.exit(-1)

    modified = False
    if "preferences" not in config:
        config["preferences"] = {}
        modified = True

    prefs = config["preferences"]
    for key, val in PREF_DEFAULTS.items():
        if key not in prefs:
            prefs[key] = dict(val) if isinstance(val, dict) else val
            modified = True

    # Fill in single missing bindings without clobbering the user's ones
    for name, key in PREF_DEFAULTS["keys"].items():
        if name not in prefs["keys"]:
            prefs["keys"][name] = key
            modified = True

    if modified:
        save_config(config, path)

    return config

def save_config(config, path=CONFIG_PATH):
    try:
        with open(path, "w", encoding="utf-8") as f:
            json.dump(config, f, ensure_ascii=False, indent=4)
    except OSError as e:
        log(f"[red]❌ Failed to save config: {e}[/]")
