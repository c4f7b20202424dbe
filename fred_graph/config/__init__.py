"""Client configuration."""

from fred_graph.config.settings import Settings

__all__ = ["Settings"]
