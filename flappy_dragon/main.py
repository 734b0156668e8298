from rich.console import Console

from flappy_dragon import ui
from flappy_dragon.log import set_log_fn
from flappy_dragon.config import load_config, CONFIG_PATH
from flappy_dragon.input_handler import KeyBindings
from flappy_dragon.game_state import State
from flappy_dragon.term import Term, main_loop

console = Console()

def main(config_path=CONFIG_PATH):
    # 1. Config
    config = load_config(config_path)
    prefs = config["preferences"]

    if prefs.get("verbose"):
        set_log_fn(console.print)

    # 2. Backend
    bindings = KeyBindings.from_config(prefs["keys"])
    term = Term(bindings=bindings, console=console)

    ui.print_banner(config, console)

    # 3. Run; BackendInitError is fatal and propagates
    try:
        main_loop(term, State(), fps=prefs["fps"])
    except KeyboardInterrupt:
        console.print("\n[yellow]Cancelled.[/]")
    ui.print_goodbye(console)

if __name__ == "__main__":
    main()
