"""
Command-line entry points.
"""
