"""
API Routers Package
Exposes all route modules for the lipsum service
"""

from . import lipsum_router
from . import markov_router

__all__ = [
    "lipsum_router",
    "markov_router",
]
