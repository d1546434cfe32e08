from ..colors.hsla import hsla
from ..gradients.stops import color_stop

# Seven-color rainbow wrapping back to red, hues given in degrees / 360.
RAINBOW_STOPS = (
    color_stop(hsla(0.0, 1.0, 0.5, 1.0), 0.0),              # red
    color_stop(hsla(30.0 / 360.0, 1.0, 0.5, 1.0), 0.14),    # orange
    color_stop(hsla(60.0 / 360.0, 1.0, 0.5, 1.0), 0.28),    # yellow
    color_stop(hsla(120.0 / 360.0, 1.0, 0.5, 1.0), 0.42),   # green
    color_stop(hsla(240.0 / 360.0, 1.0, 0.5, 1.0), 0.57),   # blue
    color_stop(hsla(275.0 / 360.0, 1.0, 0.5, 1.0), 0.71),   # indigo
    color_stop(hsla(300.0 / 360.0, 1.0, 0.5, 1.0), 0.85),   # violet
    color_stop(hsla(0.0, 1.0, 0.5, 1.0), 1.0),              # red
)

# Opaque red fading to transparent white by half radius.
RED_GLOW_STOPS = (
    color_stop(hsla(0.0, 1.0, 0.5, 1.0), 0.0),
    color_stop(hsla(0.0, 0.5, 1.0, 0.0), 0.5),
)

BLACK = hsla(0.0, 0.0, 0.0, 1.0)
WHITE = hsla(0.0, 0.0, 1.0, 1.0)
RED = hsla(0.0, 1.0, 0.5, 1.0)
BLUE = hsla(240.0 / 360.0, 1.0, 0.5, 1.0)
