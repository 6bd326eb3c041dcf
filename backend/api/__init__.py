"""
HTTP routers.

- todo_lists: /api/v1/list
- users: /api/v1/user
"""
