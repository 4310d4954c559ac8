"""
Task subsystem.

Components:
- task_models.py: data structures (RegularTask, RecurringTask, Frequency, CompletionResult)
- recurrence.py: next-occurrence arithmetic and due-date parsing
- task_store.py: in-memory store (create / lookup / filter / complete)
- task_api.py: ready-made predicates for TaskStore.get_tasks_by_type()
"""
