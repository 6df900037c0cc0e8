"""Task Dashboard package.

Feature modules (tasks, attendance, kpi, evaluation, ...) sit on top of a
pure evaluation engine, with thin Flask controllers and service/repository
layers around it.
"""
