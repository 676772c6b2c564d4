"""
Command line front end.

	disco spin [prograde|retrograde] [tol]

Prints the equatorial ISCO radius and what it corresponds to for a few black hole masses.
"""

import sys
from . import config
from .kerr import compute_isco, InvalidSpinError
from .units import convert_units

usage = """Usage: disco spin [prograde|retrograde] [tol]
Examples:
  disco 0.9 prograde
  disco 0.5 retrograde
  disco -0.2 prograde    (for counter-rotating black holes)"""

def parseArguments(argv):
	"""
	Turn the command line words into (spin, prograde, tolerance).  Raises ValueError on anything malformed.
	"""

	try:
		spin = float(argv[0])
	except ValueError:
		raise ValueError("Spin must be a number, not " + repr(argv[0]))

	direction = argv[1] if len(argv) > 1 else config.parameterDefaults['direction']
	if direction not in config.directions:
		raise ValueError("Direction must be 'prograde' or 'retrograde', not " + repr(direction))

	tolerance = config.parameterDefaults['tolerance']
	if len(argv) > 2:
		try:
			tolerance = float(argv[2])
		except ValueError:
			raise ValueError("Tolerance must be a number, not " + repr(argv[2]))

	return spin, direction == 'prograde', tolerance

def formatResults(spin, prograde, r_isco, parameters=None):
	"""
	Lay out the results as the lines that the command line tool prints.
	"""

	settings = config.setParameters(parameters)
	lines = ["", "Equatorial ISCO Results (a={0}, {1}):".format(spin, "prograde" if prograde else "retrograde")]
	lines.append("ISCO radius: {0:.{1}f} gravitational radii".format(r_isco, settings['radiusDigits']))

	conversion = convert_units(1.0, settings['referenceMass'])
	lines.append("Conversion factor: 1 gravitational radius = {0:.{1}e} pc/Msun".format(conversion.pc, settings['distanceDigits']))

	#Display for standard mass scales
	for mass in settings['illustrativeMasses']:
		massConversion = convert_units(r_isco, mass)
		lines.append("For {0:.0e} Msun BH: {1:.{2}e} pc ({3:.{4}f} AU)".format(mass, massConversion.pc, settings['distanceDigits'], \
		massConversion.au, settings['auDigits']))

	return lines

def main(argv=None):
	"""
	Run the command line tool.  Returns the exit status.
	"""

	if argv is None:
		argv = sys.argv[1:]

	if len(argv) < 1:
		print(usage)
		return 0

	try:
		spin, prograde, tolerance = parseArguments(argv)
		r_isco = compute_isco(spin, prograde=prograde)
	except InvalidSpinError as error:
		print("Error: " + str(error), file=sys.stderr)
		return 1
	except ValueError as error:
		print("Error: " + str(error), file=sys.stderr)
		print(usage, file=sys.stderr)
		return 1

	for line in formatResults(spin, prograde, r_isco):
		print(line)
	return 0

if __name__ == '__main__':
	sys.exit(main())
