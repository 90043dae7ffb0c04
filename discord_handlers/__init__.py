"""
Discord event intake and outcome delivery
"""
