"""
Render palette swatch PNGs and HTML color tables from a JSON palette file.
"""

__version__ = "0.1.0"
