import random

from flappy_dragon.player import Player


def test_gravity_accelerates_until_cap() -> None:
    player = Player(5, 25)
    velocities = []
    for _ in range(4):
        player.apply_gravity_and_move()
        velocities.append(player.velocity)
    assert velocities == [0.5, 1.0, 1.0, 1.0]


def test_move_advances_x_and_truncates_velocity() -> None:
    player = Player(5, 25)
    player.apply_gravity_and_move()
    assert (player.x, player.y) == (6, 25)  # int(0.5) == 0
    player.apply_gravity_and_move()
    assert (player.x, player.y) == (7, 26)
    player.apply_gravity_and_move()
    assert (player.x, player.y) == (8, 27)


def test_flap_overrides_velocity() -> None:
    for start in (0.0, 1.0, -4.0, -2.5):
        player = Player(0, 20)
        player.velocity = start
        player.flap()
        assert player.velocity == -4.0


def test_flap_then_tick_rises_toward_zero() -> None:
    player = Player(0, 20)
    player.flap()
    player.apply_gravity_and_move()
    assert player.velocity == -3.5
    assert player.y == 17  # int(-3.5) == -3


def test_y_is_clamped_at_top() -> None:
    player = Player(0, 1)
    player.flap()
    player.apply_gravity_and_move()
    assert player.y == 0


def test_y_never_negative_for_random_inputs() -> None:
    rng = random.Random(99)
    player = Player(0, 25)
    for _ in range(500):
        if rng.random() < 0.4:
            player.flap()
        player.apply_gravity_and_move()
        assert player.y >= 0


def test_animation_cycles_through_six_frames() -> None:
    player = Player(0, 10)
    seen = []
    for _ in range(7):
        seen.append(player.frames[player.current_frame])
        player.apply_gravity_and_move()
    assert seen == [64, 1, 2, 3, 2, 1, 64]


def test_render_draws_sprite_on_sprite_layer(term, screen_row) -> None:
    player = Player(40, 12)
    term.set_active_console(1)
    player.render(term)

    sprite = term.layers[1].sprites[0]
    assert sprite.pos == (2.0, 12.0)
    assert sprite.scale == (2.0, 2.0)
    assert sprite.glyph == 64
    # 2x2 footprint starting at column 2
    assert screen_row(term, 12)[2:4] == "@@"
    assert screen_row(term, 13)[2:4] == "@@"
    assert term.layers[0].sprites == []
