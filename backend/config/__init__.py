"""
Configuration modules.
"""
