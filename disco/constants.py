"""
Physical constants in SI units.  CODATA 2018 for G and c, IAU nominal values for the rest.

Everything in here is read-only.  Functions that need constants take a PhysicalConstants record,
defaulting to CODATA2018, so that nothing ever has to rebind these names.
"""

from collections import namedtuple

G = 6.67430e-11			#m^3 kg^-1 s^-2
c = 2.99792458e8		#m/s
M_sun = 1.98847e30		#kg
pc = 3.08567758e16		#m
AU = 1.495978707e11		#m
km = 1e3				#m

PhysicalConstants = namedtuple('PhysicalConstants', ['G', 'c', 'M_sun', 'pc', 'AU'])

CODATA2018 = PhysicalConstants(G=G, c=c, M_sun=M_sun, pc=pc, AU=AU)
