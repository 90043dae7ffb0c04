"""
Shared utilities: logging, configuration and formatting
"""
