"""
Task subsystem.

Components:
- task_models.py: task entities (Todo, Deadline, Event)
- task_list.py: ordered, bounds-checked task collection
- task_store.py: text file codec (load/save)
"""
