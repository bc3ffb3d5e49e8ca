"""
Core infrastructure: logging, configuration, paths and exceptions.
"""
