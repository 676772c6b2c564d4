from .plotISCO import *
