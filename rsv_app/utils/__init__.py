"""
Utility functions module.

Time Semantics:
- Bar timestamps supplied by the host platform are ALWAYS authoritative
- Session checks compare time-of-day only, never the calendar date
- Naive timestamps are taken to already be in session-local time
"""
