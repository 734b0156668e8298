import sys

def _default_log_fn(data, *args, **kwargs):
    """Default sink: drop everything until the game installs a console."""
    pass

# Stored on the module so every importer shares the same sink
_module = sys.modules[__name__]

_module._log_fn = _default_log_fn

def log(data, *args, **kwargs):
    """
    Send a message to the current log sink.

    Supports:
    - log("Score: {}", 3)
    - log("[bold]msg[/]")            # rich markup
    - log("msg", style="red")        # when the sink accepts kwargs
    """
    if args and isinstance(data, str):
        try:
            data = data.format(*args)
        except (IndexError, KeyError, ValueError):
            pass  # keep the raw string

    try:
        _module._log_fn(data, **kwargs)
    except Exception:
        # a broken sink must never take the game loop down
        pass

def set_log_fn(fn):
    """
    Install the log sink.

    fn: any callable, e.g. console.print or print
    """
    if not callable(fn):
        raise TypeError("log function must be callable")

    _module._log_fn = fn

def reset_log_fn():
    _module._log_fn = _default_log_fn
