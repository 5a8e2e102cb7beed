"""Bash completion script generator for the Zanata command-line client"""

__version__ = "0.1.0"
