from .. import config
import pytest

def test_defaults():
	settings = config.setParameters()
	assert settings['direction'] == 'prograde'
	assert settings['illustrativeMasses'] == [10.0, 1e6]
	assert settings['referenceMass'] == 1.0

def test_override():
	settings = config.setParameters({'illustrativeMasses': [1e9], 'radiusDigits': 4})
	assert settings['illustrativeMasses'] == [1e9]
	assert settings['radiusDigits'] == 4
	assert settings['distanceDigits'] == config.parameterDefaults['distanceDigits']

def test_defaults_untouched():
	settings = config.setParameters()
	settings['illustrativeMasses'].append(1.0)
	assert config.parameterDefaults['illustrativeMasses'] == [10.0, 1e6]

def test_unknown_key_skipped(capsys):
	settings = config.setParameters({'spinMax': 0.998})
	assert 'spinMax' not in settings
	assert "spinMax" in capsys.readouterr().out

def test_bad_direction():
	with pytest.raises(ValueError):
		config.setParameters({'direction': 'sideways'})

def test_not_a_dictionary():
	with pytest.raises(TypeError):
		config.setParameters([('direction', 'prograde')])
