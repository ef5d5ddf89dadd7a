"""Terrain API routers."""
