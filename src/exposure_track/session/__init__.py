"""
Timed exposure sessions.

- timer.py: asyncio countdown for one ongoing task
- task_session.py: ties a countdown to the task store (complete / cancel)
"""
