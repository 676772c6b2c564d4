import numpy as np
from .calcISCO import compute_isco

def calcRadiativeEfficiency(a, prograde=True):
	"""
	Calculate the radiative efficiency of a thin accretion disk that ends at the ISCO.

	This is the binding energy per unit rest mass at the ISCO, 1 - E_isco.  Only a thin disk model is included.
	"""

	isco = compute_isco(a, prograde=prograde)
	return 1.0 - (1.0 - 2.0/3.0/isco)**0.5
