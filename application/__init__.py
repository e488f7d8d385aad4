"""
Application Layer for the TotalGrind training log.

This package contains:
- exceptions: Application-layer errors translated to HTTP status codes by the app factory
- ports/: Abstract repository interfaces (what the use cases need)
- use_cases/: Business operations coordinating domain logic and ports
"""
