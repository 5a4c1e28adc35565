# Lengths are kilometres.
MIN_STAR_RADIUS = 20000.0

MIN_PLANET_RADIUS = 1000.0
PLANET_RADIUS_STAR_DIVISOR = 10
PLANET_MIN_ORBIT_STAR_FACTOR = 10
PLANET_MAX_ORBIT_STAR_FACTOR = 20

MIN_MOON_RADIUS = 10.0
MOON_RADIUS_PLANET_DIVISOR = 17
MOON_MIN_ORBIT_PLANET_FACTOR = 5

# Text record format
FIELD_SEPARATOR = ":"
DEPTH_MARKER = "-"
STAR_DEPTH = 0
PLANET_DEPTH = 1
MOON_DEPTH = 2
