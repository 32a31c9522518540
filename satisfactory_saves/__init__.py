"""
Satisfactory save listing server
Lists save files by game and links them to the interactive map viewer
"""

__version__ = "1.2.0"
