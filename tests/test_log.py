import pytest

from flappy_dragon.log import log, set_log_fn


def test_default_sink_is_silent(capsys) -> None:
    log("nothing to see")
    assert capsys.readouterr().out == ""


def test_set_log_fn_rejects_non_callable() -> None:
    with pytest.raises(TypeError):
        set_log_fn("console")


def test_args_are_formatted_into_message() -> None:
    messages = []
    set_log_fn(messages.append)
    log("Crashed at x={} with {} points", 12, 3)
    assert messages == ["Crashed at x=12 with 3 points"]


def test_bad_format_keeps_raw_message() -> None:
    messages = []
    set_log_fn(messages.append)
    log("{} and {}", 1)
    assert messages == ["{} and {}"]


def test_kwargs_reach_the_sink() -> None:
    seen = []
    set_log_fn(lambda data, **kwargs: seen.append((data, kwargs)))
    log("hello", style="red")
    assert seen == [("hello", {"style": "red"})]


def test_broken_sink_does_not_raise() -> None:
    def _boom(data, **kwargs):
        raise RuntimeError("sink down")

    set_log_fn(_boom)
    log("still fine")
