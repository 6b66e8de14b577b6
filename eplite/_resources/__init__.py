"""Resource namespaces grouping the Etherpad API operations."""

from .authors import Authors
from .chat import Chat
from .groups import Groups
from .pads import Pads
from .sessions import Sessions

__all__ = [
    "Authors",
    "Chat",
    "Groups",
    "Pads",
    "Sessions",
]
