"""Field Force Tracker package.

Organized by feature modules (users, attendance, tasks, maps, ...) around one
explicit application-state object, with a thin Flask controller layer on top
of the service layer.
"""
