from .color import Color, from_channels

# Solid fills
RED = Color((1.0, 0.0, 0.0))
GREEN = Color((0.0, 1.0, 0.0))
BLUE = Color((0.0, 0.0, 1.0))
ORANGE = Color((1.0, 0.5, 0.0))

WHITE = Color((1.0, 1.0, 1.0))
BLACK = Color((0.0, 0.0, 0.0))

# Italy, left to right
ITALY_GREEN = from_channels(0, 146, 70)
ITALY_WHITE = from_channels(244, 245, 240)
ITALY_RED = from_channels(205, 33, 42)
ITALY = (ITALY_GREEN, ITALY_WHITE, ITALY_RED)

# Germany, top to bottom
GERMANY_BLACK = from_channels(0, 0, 0)
GERMANY_RED = from_channels(221, 0, 0)
GERMANY_GOLD = from_channels(255, 206, 0)
GERMANY = (GERMANY_BLACK, GERMANY_RED, GERMANY_GOLD)

# Japan, field then disc
JAPAN_WHITE = from_channels(255, 255, 255)
JAPAN_RED = from_channels(188, 0, 45)
JAPAN = (JAPAN_WHITE, JAPAN_RED)

# Stripes preview palette
RAINBOW = (
    RED,
    ORANGE,
    from_channels(255, 204, 0),
    from_channels(52, 199, 89),
    BLUE,
    from_channels(88, 86, 214),
)
