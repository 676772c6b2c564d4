import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt
import numpy as np
from .. import *

def test_curves():
	spins = np.linspace(0, 0.99, 50)
	fig, ax = plotISCO(spins=spins)
	prograde, retrograde = ax.get_lines()
	np.testing.assert_allclose(prograde.get_ydata()[0], 6.0)
	assert np.all(prograde.get_ydata() <= retrograde.get_ydata())
	plt.close(fig)

def test_save(tmp_path, capsys):
	output = tmp_path / "isco.png"
	fig, ax = plotISCO(output=output)
	assert output.exists()
	assert "Saving figure" in capsys.readouterr().out
	plt.close(fig)

def test_save_silent(tmp_path, capsys):
	fig, ax = plotISCO(output=tmp_path / "isco.pdf", silent=True)
	assert capsys.readouterr().out == ""
	plt.close(fig)
