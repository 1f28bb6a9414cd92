"""
Core settings, logging and error types.
"""
