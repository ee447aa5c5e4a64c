"""Generic utility modules for buttonshim.

- observer: Thread-safe observer list used for event fan-out
- persistence: JSON load/save for Pydantic models
"""

from .observer import ObserverManager
from .persistence import PydanticPersistence

__all__ = ["ObserverManager", "PydanticPersistence"]
