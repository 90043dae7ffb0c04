"""
Trade signal interpretation and execution core
"""
