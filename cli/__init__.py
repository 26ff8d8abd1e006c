"""
Contrast CLI Package

Command-line interface for computing the WCAG contrast ratio between two colors.

Usage:
    contrast 000000 FFFFFF
    contrast "#1A365D" 255,255,255 --precision 2
    contrast 0x777777 777777 --format json --wcag
"""

__version__ = "0.1.0"
__author__ = "Contrast Ratio Team"

from cli.main import app

__all__ = ["app", "__version__"]
