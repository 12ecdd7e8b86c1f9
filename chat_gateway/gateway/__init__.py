"""Gateway composition: validator -> dispatcher -> adapter."""

from .dispatcher import Dispatcher
from .entry import Gateway

__all__ = ["Gateway", "Dispatcher"]
