"""
Framework integrations.
"""
