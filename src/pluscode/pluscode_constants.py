"""
Constants shared by every part of the plus code codec.

The encoder, decoder and validator must all agree on these values; they are
module-level and never modified at runtime.
"""

# Separator used to break the code into two parts to aid memorability.
SEPARATOR = "+"

# Number of characters to place before the separator.
SEPARATOR_POSITION = 8

# Character used to pad codes.
PADDING_CHARACTER = "0"

# Character set used to encode the values.
CODE_ALPHABET = "23456789CFGHJMPQRVWX"

# Base to use to convert numbers to/from.
ENCODING_BASE = len(CODE_ALPHABET)

# Maximum values for latitude and longitude in degrees.
LATITUDE_MAX = 90
LONGITUDE_MAX = 180

# Maximum code length using lat/lng pair encoding. The area of such a code is
# approximately 13x13 meters at the equator.
PAIR_CODE_LENGTH = 10

# Place value in degrees of each lat/lng pair position.
PAIR_RESOLUTIONS = [20.0, 1.0, 0.05, 0.0025, 0.000125]

# Grid refinement dimensions.
GRID_COLUMNS = 4
GRID_ROWS = 5

# Size of the initial grid cell in degrees.
GRID_SIZE_DEGREES = 0.000125

# Minimum length of a code that can be shortened.
MIN_TRIMMABLE_CODE_LEN = 6
