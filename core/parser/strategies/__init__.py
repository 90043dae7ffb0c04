"""
Dialect parsing strategies
"""
