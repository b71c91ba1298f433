"""API Routes"""
from . import empresa_routes, health_routes

__all__ = ["empresa_routes", "health_routes"]
