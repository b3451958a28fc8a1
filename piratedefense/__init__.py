"""A pirate-themed tower defense game with terminal and graphical front ends."""

__version__ = "0.1.0"