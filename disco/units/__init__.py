from .convertUnits import *
