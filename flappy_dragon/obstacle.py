import random
from flappy_dragon.config import SCREEN_HEIGHT, GRAY, BLACK

GAP_Y_RANGE = (10, 40)  # half-open
MAX_GAP = 20
MIN_GAP = 2
WALL_GLYPH = 179  # CP437 '│'

class Obstacle:
    def __init__(self, x, gap_y, gap_size):
        self.x = x
        self.gap_y = gap_y
        self.gap_size = gap_size

    def render(self, ctx, player_x):
        screen_x = self.x - player_x
        half_size = self.gap_size // 2

        # top wall
        for y in range(0, self.gap_y - half_size):
            ctx.set(screen_x, y, GRAY, BLACK, WALL_GLYPH)

        # bottom wall
        for y in range(self.gap_y + half_size, SCREEN_HEIGHT):
            ctx.set(screen_x, y, GRAY, BLACK, WALL_GLYPH)

    def hit_obstacle(self, player):
        half_size = self.gap_size // 2
        does_x_match = player.x == self.x
        player_above_gap = player.y < self.gap_y - half_size
        player_below_gap = player.y > self.gap_y + half_size

        return does_x_match and (player_above_gap or player_below_gap)

    def __repr__(self):
        return f"Obstacle(x={self.x}, gap_y={self.gap_y}, gap_size={self.gap_size})"

def new_obstacle(world_x, score, rng=None):
    """Spawn the next obstacle at world_x; the gap narrows as the score grows."""
    rng = rng or random.Random()
    return Obstacle(
        world_x,
        rng.randrange(*GAP_Y_RANGE),
        max(MIN_GAP, MAX_GAP - score),
    )
