"""
Application Layer for the Workout Tracker API.

This package contains:
- ports/: Abstract repository interfaces (what the services need)
- exceptions.py: User-facing errors raised by backend.core services
"""
