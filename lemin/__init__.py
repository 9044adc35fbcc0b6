"""Ant farm simulator: parse a room graph, choose routes and move the ants."""

__version__ = "0.1.0"