import io
import os
import select

import pytest
from rich.console import Console

from flappy_dragon.log import reset_log_fn
from flappy_dragon.term import Term


class ScriptedRandom:
    """Stand-in for random.Random that hands out fixed randrange results."""

    def __init__(self, values):
        self.values = list(values)
        self.calls = []

    def randrange(self, start, stop):
        self.calls.append((start, stop))
        return self.values.pop(0)


@pytest.fixture(autouse=True)
def _silent_log():
    reset_log_fn()
    yield
    reset_log_fn()


@pytest.fixture
def term() -> Term:
    return Term(console=Console(file=io.StringIO(), width=120))


@pytest.fixture
def screen_row():
    def _row(term: Term, y: int) -> str:
        return "".join(cell[0] for cell in term.composite()[y])

    return _row


@pytest.fixture
def scripted_rng():
    return ScriptedRandom


@pytest.fixture
def pty_stdin():
    """A real terminal pair: (master fd, slave side opened as a text stream)."""
    master, slave = os.openpty()
    stream = os.fdopen(slave, "r")
    yield master, stream
    stream.close()
    os.close(master)


@pytest.fixture
def wait_readable():
    def _wait(stream, timeout: float = 1.0) -> None:
        select.select([stream], [], [], timeout)

    return _wait
