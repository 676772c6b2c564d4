from setuptools import setup, find_packages

setup(name='disco',
      version='1.0',
      description='Deterministic ISCO solver for compact objects: equatorial ISCO radii of Kerr black holes in geometric and physical units.',
      license='ISC',
      packages=find_packages(include=['disco', 'disco.*']),
      install_requires=['numpy','matplotlib'],
      extras_require={'test': ['pytest','scipy']},
      entry_points={'console_scripts': ['disco=disco.disco:main']})
