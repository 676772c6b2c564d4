"""
Default settings for the command line tool.  Override with setParameters rather than editing these.
"""

parameterDefaults = {'direction': 'prograde', 'tolerance': 1e-6, 'referenceMass': 1.0, 'illustrativeMasses': [10.0, 1e6], \
'radiusDigits': 12, 'distanceDigits': 12, 'auDigits': 3, 'silent': False}

#The tolerance is accepted for compatibility only.  Bardeen's formula is exact, so nothing iterates to it.

directions = ['prograde', 'retrograde']

def setParameters(parameters=None):
	"""
	Interpret the input parameters.  Returns a new dictionary of the defaults overlaid with the user's choices.
	"""

	#Parameters should be a dictionary.
	if isinstance(parameters, dict):
		parameterDictionary = parameters
	elif parameters is None:
		parameterDictionary = {}
	else:
		raise TypeError("Parameters should be a dictionary, not " + type(parameters).__name__)

	#For each parameter, take the dictionary value if there is one.
	settings = {}
	for parameterKey in parameterDefaults.keys():
		if parameterKey in parameterDictionary.keys():
			settings[parameterKey] = parameterDictionary[parameterKey]
		else:
			settings[parameterKey] = parameterDefaults[parameterKey]
	settings['illustrativeMasses'] = list(settings['illustrativeMasses'])

	#Check if there were any keys that did not get used.  This could be a mistake.
	for parameterKey in parameterDictionary.keys():
		if not (parameterKey in parameterDefaults.keys()):
			print("WARNING:  You provided a value for "+parameterKey+", but this is not a parameter.  Skipping.")

	if settings['direction'] not in directions:
		raise ValueError("direction must be 'prograde' or 'retrograde', not " + repr(settings['direction']))

	return settings
