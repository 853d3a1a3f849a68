"""
Application Layer for the fitness dashboard API.

This package contains:
- ports/: Abstract repository interfaces (what the domain needs)
- exceptions.py: Errors shared by the domain, application and infrastructure layers
"""
