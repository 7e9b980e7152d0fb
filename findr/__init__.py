"""
findr - incremental file-name search for the terminal
"""

__version__ = "0.1.0"
