"""
Jade Night Banquet.

Game engine, wire schema and settings for the Jade Night Banquet card game.
"""

__version__ = "0.1.0"
