"""Falling-block puzzle engine with a pygame front end and a Gymnasium environment."""

__version__ = "0.1.0"
