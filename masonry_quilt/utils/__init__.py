"""Utility modules for the masonry layout engine.

This package contains the building blocks used by the calculator:
- grid: Container to internal grid sizing
- formats: Item format parsing and size resolution
- occupancy: Dense occupancy table of the internal grid
- cards: Placed card records
- packers: The placement phases
- metrics: Utilization, order fidelity and free space reporting
- coordinates: Internal units to pixel projection
"""
