"""
Data models for the closed boundary builder.
"""

from .geometry import Node, Way, EndpointKey

__all__ = [
    'Node', 'Way', 'EndpointKey',
]
