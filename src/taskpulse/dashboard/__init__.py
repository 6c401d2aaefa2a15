"""
Dashboard read models.

Components:
- summary.py: one-snapshot summary of a task list (status counts, completion
  rate, overdue and due-soon figures)
"""
