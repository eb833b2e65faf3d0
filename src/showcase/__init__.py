"""
showcase - Portfolio content discovery from a folder tree.

Usage:
    showcase              # List projects and experience in ./public
    showcase --init       # Initialize local config
    showcase --export DIR # Write content.json for a static build
"""

__version__ = "0.1.0"
