"""
Task record access.

Components:
- task_models.py: status/priority vocabularies and read-only field access
  for task records delivered by the document store (dicts or objects)
"""
