from . import fmt, logger
from .ansi import *
