"""
Poetry service for Dead Poets
"""
