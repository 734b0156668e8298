from rich.console import Console
from rich.panel import Panel
from rich.style import Style
from rich.table import Table
from rich.text import Text

def key_label(key):
    return "SPACE" if key == " " else key.upper()

def compose(term):
    """Render the term's layers as a rich Panel, one Text line per row."""
    styles = {}
    text = Text(no_wrap=True, overflow="crop")

    for y, row in enumerate(term.composite()):
        if y: text.append("\n")
        run, run_style = [], None
        for ch, fg, bg in row:
            style = styles.get((fg, bg))
            if style is None:
                style = styles[(fg, bg)] = Style(color=fg, bgcolor=bg)
            if style is not run_style and run:
                text.append("".join(run), style=run_style)
                run = []
            run_style = style
            run.append(ch)
        if run:
            text.append("".join(run), style=run_style)

    return Panel(text, title=f"🐉 {term.title}", border_style="yellow", padding=0, expand=False)

def print_banner(config, console=None):
    console = console or Console()
    prefs = config["preferences"]
    keys = prefs["keys"]

    t = Table(show_header=False, box=None)
    t.add_column("Action", style="cyan")
    t.add_column("Key", style="bold yellow")
    for action in ("play", "flap", "quit"):
        t.add_row(action.capitalize(), key_label(keys[action]))

    console.print(Panel.fit(t, title="✨ Flappy Dragon ✨", subtitle=f"[dim]{prefs['fps']} fps[/]",
                            border_style="magenta"))

def print_goodbye(console=None):
    console = console or Console()
    console.print("[bold red]👋 Bye![/]")
