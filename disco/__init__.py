"""
DISCO: Deterministic ISCO Solver for Compact Objects.

Equatorial ISCO radii of Kerr black holes from Bardeen's closed form, and their size in physical units.
"""

from . import constants
from . import config
from .kerr import *
from .units import *
