from flappy_dragon.config import WHITE, NAVY

GRAVITY_STEP = 0.5
FALL_CAP = 1.0  # stop accelerating once velocity reaches this
FLAP_IMPULSE = -4.0
SCREEN_COLUMN = 2.0  # where the dragon is drawn, the world scrolls past it

class Player:
    def __init__(self, x, y):
        self.x = x
        self.y = y
        self.velocity = 0.0
        self.frames = [64, 1, 2, 3, 2, 1]
        self.current_frame = 0

    def render(self, ctx):
        ctx.set_fancy((SCREEN_COLUMN, float(self.y)), 1, 0.0, (2.0, 2.0),
                      WHITE, NAVY, self.frames[self.current_frame])

    def apply_gravity_and_move(self):
        if self.velocity < FALL_CAP:
            self.velocity += GRAVITY_STEP

        self.x += 1
        self.y += int(self.velocity)  # truncates toward zero

        if self.y < 0:
            self.y = 0

        self.current_frame = (self.current_frame + 1) % len(self.frames)

    def flap(self):
        self.velocity = FLAP_IMPULSE
