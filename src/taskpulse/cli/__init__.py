"""
Command-line entry points.

Components:
- main.py: `taskpulse-report`, prints a dashboard summary for a JSON task export
"""
