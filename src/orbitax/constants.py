"""
The `constants` module defines common mathematical and physical constants used in astrodynamics.
"""

import math

# Mathematical Constants
"""
The constant pi, the ratio of a circle's circumference to its diameter. [dimensionless]
"""
PI = math.pi

"""
Euler's number, the base of the natural logarithm. [dimensionless]
"""
E = math.exp(1.0)

"""
The golden ratio, (1 + sqrt(5)) / 2. [dimensionless]
"""
GOLDEN_RATIO = 0.5 * (1.0 + math.sqrt(5.0))

"""
Not-a-number sentinel for undefined or unrepresentable values.
"""
NAN = math.nan

"""
Constant to convert degrees to radians. Equal to 2pi/360. Units: *rad/deg*
"""
DEG2RAD = 2.0 * PI / 360.0

"""
Constant to convert radians to degrees. Equal to 360/2pi. Units: *deg/rad*
"""
RAD2DEG = 360.0 / (PI * 2.0)

# Time Constants
"""
Julian day. Units: *s*

References:

1. NASA, *Astronomical Constants*, 2012
"""
JULIAN_DAY = 86400.0

"""
Julian year expressed in Julian days. Units: *days*

References:

1. NASA, *Astronomical Constants*, 2012
"""
JULIAN_YEAR_IN_DAYS = 365.25

"""
Julian year. Equal to JULIAN_YEAR_IN_DAYS * JULIAN_DAY. Units: *s*
"""
JULIAN_YEAR = 3.15576e7

"""
Sidereal day. Units: *s*

References:

1. NASA, *Astronomical Constants*, 2012
"""
SIDEREAL_DAY = 86164.09054

"""
Sidereal year in Julian days, quasar reference frame. Units: *days*

References:

1. NASA, *Astronomical Constants*, 2012
"""
SIDEREAL_YEAR_IN_DAYS = 365.25636

"""
Sidereal year, quasar reference frame. Equal to SIDEREAL_YEAR_IN_DAYS * JULIAN_DAY. Units: *s*
"""
SIDEREAL_YEAR = 3.1558149504e7

# Physical Constants
"""
Speed of light in vacuum. Units: *m/s*

References:

1. E. M. Standish, *Report of the IAU WGAS Sub-group on Numerical Standards*, 1995
"""
SPEED_OF_LIGHT = 299792458.0

"""
Newtonian constant of gravitation. Units: *m^3/(kg s^2)*

References:

1. E. M. Standish, *Report of the IAU WGAS Sub-group on Numerical Standards*, 1995
"""
GRAVITATIONAL_CONSTANT = 6.67259e-11

"""
Astronomical Unit. Units: *m*

References:

1. E. M. Standish, *JPL Planetary and Lunar Ephemerides, DE405/LE405*, 1998
"""
ASTRONOMICAL_UNIT = 1.49597870691e11

"""
Specific gas constant of air. Units: *J/(kg K)*

References:

1. J. D. Anderson, *Hypersonic and High-Temperature Gas Dynamics*, 2006
"""
SPECIFIC_GAS_CONSTANT_AIR = 2.87e2

# Earth Constants
"""
Earth's equatorial radius. [m]

References:

1. GGM05s Gravity Model
"""
R_EARTH = 6.378136300e6  # [m] GGM05s Value

"""
Earth's Gravitational constant [m^3/s^2]

References:

1. O. Montenbruck, and E. Gill, *Satellite Orbits: Models, Methods and
Applications*, 2012.
"""
GM_EARTH = 3.986004415e14  # [m^3/s^2] GGM05s Value

# Sun Constants
"""
Gravitational constant of the Sun. [m^3/s^2]

References:

1. O. Montenbruck, and E. Gill, *Satellite Orbits: Models, Methods and
Applications*, 2012.
"""
GM_SUN = 132712440041.939400 * 1e9  # Gravitational constant of the Sun
