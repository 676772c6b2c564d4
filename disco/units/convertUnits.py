import numpy as np
import warnings
from collections import namedtuple
from ..constants import CODATA2018

PhysicalDistanceSet = namedtuple('PhysicalDistanceSet', ['geometric', 'pc', 'au', 'km'])

def gravitationalRadius(mass_sun, constants=CODATA2018):
	"""
	Return GM/c^2 in meters.  Mass should be in solar masses.
	"""
	return constants.G * mass_sun * constants.M_sun / constants.c**2

def convert_units(r_g, mass_sun, constants=CODATA2018):
	"""
	Convert a length in gravitational radii into parsecs, AU, and km for a black hole of mass_sun solar masses.

	r_g is echoed back as the geometric field.  Nothing is checked for physical plausibility.
	"""

	if np.any(np.asarray(mass_sun) <= 0):
		warnings.warn("Non-positive black hole mass {0} Msun; distances will not be physical.".format(mass_sun), RuntimeWarning)

	meters = r_g * gravitationalRadius(mass_sun, constants=constants)
	return PhysicalDistanceSet(geometric=r_g, pc=meters/constants.pc, au=meters/constants.AU, km=meters/1000)
