import numpy as np

class InvalidSpinError(ValueError):
	"""
	Raised when a spin parameter lies outside of -1 < a < 1.
	"""
	pass

def realCubeRoot(x):
	"""
	Real, sign-preserving cube root.  Never complex, never NaN for finite input.
	"""
	return np.cbrt(x)

def validateSpin(a):
	"""
	Return the spin as a float array, or raise InvalidSpinError if any element is unphysical.
	"""

	spin = np.atleast_1d(a).astype(float)
	badSpins = ~np.isfinite(spin) | (np.abs(spin) >= 1.0)
	if np.any(badSpins):
		raise InvalidSpinError("Spin parameter must satisfy -1 < a < 1, got {0}".format(spin[badSpins][0]))
	return spin

def _zTerms(spinMagnitude):
	z1 = 1.0 + realCubeRoot(1.0-spinMagnitude**2) * (realCubeRoot(1.0+spinMagnitude) + realCubeRoot(1.0-spinMagnitude))
	z2 = np.sqrt(3*spinMagnitude**2 + z1**2)
	return z1, z2

def _matchInput(a, values):
	if np.ndim(a) == 0:
		return float(values[0])
	return values.reshape(np.shape(a))

def bardeenTerms(a):
	"""
	Return Z1 and Z2 from Bardeen, Press & Teukolsky (1972).  Only the spin magnitude matters here.
	"""

	z1, z2 = _zTerms(np.abs(validateSpin(a)))
	return _matchInput(a, z1), _matchInput(a, z2)

def compute_isco(a, prograde=True):
	"""
	Return the ISCO in geometrized units (GM/c^2) for an equatorial orbit around a Kerr black hole.

	a is the dimensionless spin.  A negative spin means the hole rotates the other way, so a prograde orbit
	around -a is the same orbit as a retrograde one around a.  Accepts scalars or arrays.
	"""

	#Split magnitude and direction.
	spin = validateSpin(a)
	spinMagnitude = np.abs(spin)
	mu = np.sign(spin)
	if not prograde:
		mu = -mu

	#Following Bardeen 1972...
	z1, z2 = _zTerms(spinMagnitude)

	#z1 <= 3 analytically.  Rounding can push it a hair above 3 for tiny spins.
	r_isco = 3 + z2 - mu*np.sqrt(np.maximum(3-z1, 0.0) * (3 + z1 + 2*z2))

	return _matchInput(a, r_isco)
