"""apikit - shared runtime for generated API clients."""

__version__ = "0.1.0"

# Core exports
from .core import *
from .client import Client
from .config import Config, config
