"""Dice rolling and character arithmetic for D&D 5e character sheets."""

__version__ = "0.1.0"
