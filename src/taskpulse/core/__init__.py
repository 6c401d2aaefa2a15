"""
Core seams shared by the engine and its callers.

Components:
- ports.py: Protocols the engine depends on (Clock)
- clock.py: concrete clocks and reference-instant resolution
"""
