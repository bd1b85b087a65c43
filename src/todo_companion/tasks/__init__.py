"""
Task subsystem.

Components:
- task_models.py: task variants (ToDo, Deadline, Event) and Priority
- parser.py: command text -> typed fields (dates, indices, priorities)
- task_list.py: TaskList engine + the trusted loader used at startup
- task_store.py: flat-file save format (load/save)
"""
