"""
Shared code for the Dead Poets services
"""
