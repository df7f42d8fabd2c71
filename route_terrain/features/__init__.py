"""
Feature modules.

- terrain: elevation profile analysis, GPX input, route classification
- google: Routes and Elevation API client
"""
