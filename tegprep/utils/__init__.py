from .types import TEGFormat
from .decorators import *
