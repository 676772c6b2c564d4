"""
Plot the ISCO radius as a function of spin.
"""

import numpy as np
import matplotlib.pyplot as plt
from ..kerr import compute_isco, calcRadiativeEfficiency

def plotISCO(spins=None, output=None, show=False, silent=False, figsize=(5,4)):
	"""
	Plot prograde and retrograde ISCO radii against spin magnitude, with the thin disk efficiency on a second axis.

	Returns the figure and the radius axis.
	"""

	if spins is None:
		spins = np.linspace(0, 0.999, 500)
	spins = np.atleast_1d(spins)

	fig, ax = plt.subplots(1, 1, figsize=figsize)
	ax.plot(spins, compute_isco(spins, prograde=True), color='k', ls='-', label='Prograde')
	ax.plot(spins, compute_isco(spins, prograde=False), color='k', ls='--', label='Retrograde')
	ax.set_xlabel(r'$|a|$', fontsize=12)
	ax.set_ylabel(r'$r_\mathrm{ISCO} \ [GM/c^2]$', fontsize=12)
	ax.set_xlim(spins.min(), spins.max())
	ax.set_ylim(0, 10)
	ax.legend(loc='upper left', frameon=False)

	#Efficiency on the right, same spins.
	ax_eff = ax.twinx()
	ax_eff.plot(spins, calcRadiativeEfficiency(spins, prograde=True), color='r', ls='-', lw=1)
	ax_eff.plot(spins, calcRadiativeEfficiency(spins, prograde=False), color='r', ls='--', lw=1)
	ax_eff.set_ylabel(r'$\epsilon$', fontsize=12, color='r')
	fig.tight_layout()

	if output is not None:
		if not silent:
			print("Saving figure to " + str(output))
		fig.savefig(output)
	if show:
		plt.show()
	return fig, ax
