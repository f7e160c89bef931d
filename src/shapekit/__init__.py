"""Shapekit - Point-set geometry, rectangle and string helpers.

Shapekit is a small toolbox of pure functions for working with 2D point sets
(convex hull, clockwise ordering, polygon area and orientation), rectangles
and strings. It also ships a CLI for running the geometry helpers on points
given as arguments.

Example:
    $ shapekit hull 0,0 4,0 4,4 0,4 2,2

This prints the four corners of the square, counter-clockwise from (0, 0).
"""

__version__ = "0.1.0"
__author__ = "Shapekit Contributors"

__all__ = ["__author__", "__version__"]
