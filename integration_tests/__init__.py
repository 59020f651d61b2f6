"""Sweep runners exercising the rasterizers end to end."""
