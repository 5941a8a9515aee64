"""API routers for PsychoScore."""

from psychoscore.routers import analysis, health

__all__ = ["analysis", "health"]
