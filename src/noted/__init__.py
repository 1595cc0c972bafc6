"""
Noted: a tiny personal note and task tracker.

A SQLite-backed list of notes that provides:
- One-shot commands (noted add, noted list, ...)
- An interactive prompt with quote-aware argument splitting
- Completed/not completed views in a stable order
"""

__version__ = "0.1.0"
