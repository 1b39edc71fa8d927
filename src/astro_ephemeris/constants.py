"""Fixed constants: time scales, angles, distances, horizon thresholds, body names."""

# Time: milliseconds and seconds per unit
MS_PER_SECOND = 1000.0
MS_PER_DAY = 86_400_000.0
SECONDS_PER_MINUTE = 60.0
SECONDS_PER_HOUR = 3600.0
SECONDS_PER_DAY = 86400.0
HOURS_PER_DAY = 24.0
DAYS_PER_CENTURY = 36525.0

# Reference epochs (Julian Dates)
UNIX_EPOCH_JD = 2440587.5  # 1970-01-01T00:00Z
J2000_JD = 2451545.0  # 2000-01-01T12:00Z
UNIX_EPOCH_TO_J2000_DAYS = 10957  # whole days from 1970-01-01 to 2000-01-01
# Planetary mean elements are tabulated in days from 1999-12-31T00:00 UT.
ELEMENTS_EPOCH_OFFSET_DAYS = J2000_JD - 2451543.5

# Angle: degrees per circle and sexagesimal (DMS/arcmin/arcsec)
DEGREES_PER_CIRCLE = 360.0
ARCMIN_PER_DEGREE = 60.0
ARCSEC_PER_DEGREE = 3600.0
DEGREES_PER_HOUR_RA = 15.0  # right ascension: 360° / 24 h

# Distance
KM_PER_AU = 149_597_870.7
LIGHT_TIME_DAYS_PER_AU = 0.0057755183
ABERRATION_CONSTANT_DEG = 20.49552 / ARCSEC_PER_DEGREE

# Horizon thresholds: geocentric elevation (degrees) of the body's center at the event.
SUN_HORIZON_DEG = -0.833  # refraction plus solar semi-diameter
CIVIL_TWILIGHT_DEG = -6.0
MOON_HORIZON_DEG = 0.133  # horizontal parallax exceeds refraction plus semi-diameter
PLANET_HORIZON_DEG = -0.5667  # refraction only

# Event solver
SWEEP_STEP_HOURS = 2.0
TRANSIT_ITERATIONS = 4  # empirically enough for sub-second transit times
KEPLER_MAX_ITERATIONS = 50
KEPLER_TOLERANCE = 1e-12

# Ephemeris tables
MIN_EPHEMERIS_ROWS = 2
MAX_EPHEMERIS_ROWS = 100000
DEFAULT_INTERVAL = 1.0  # default time step in the selected unit
DEFAULT_MIN_INTERVAL_SECONDS = 1.0  # minimum interval for interval_seconds()

BODY_NAMES = (
    'sun',
    'moon',
    'mercury',
    'venus',
    'mars',
    'jupiter',
    'saturn',
    'uranus',
    'neptune',
)
