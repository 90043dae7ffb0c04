"""
Discord command cogs
"""
