from .calcISCO import *
from .calcRadiativeEfficiency import *
