"""
Trading surfaces implementing the instrument, duration and execution capabilities
"""
