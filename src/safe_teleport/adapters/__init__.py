"""World and actor adapters implementing the host contracts."""

from .memory import GridWorld, InMemoryActor

__all__ = ["GridWorld", "InMemoryActor"]
