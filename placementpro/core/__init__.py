"""
Core module - settings, domain errors and session tokens.
"""
