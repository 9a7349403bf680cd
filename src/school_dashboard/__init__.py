"""School Dashboard package.

This package is organized by feature modules (students, attendance, behavior,
announcements, ...) with a thin Flask controller layer over service and
in-memory repository layers.
"""
