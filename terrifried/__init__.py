"""Fling an egg between sinking platforms and keep it out of the lava.

Game logic (profiles, entities, scoring, world, trajectory) plus a pygame front end.
"""

__version__ = "1.0.0"