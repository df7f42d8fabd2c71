"""
Route Terrain

Elevation profile analysis for driving routes: ascent, descent, grade
extremes and a flat / hilly / mountainous classification.
"""

__version__ = "0.1.0"
