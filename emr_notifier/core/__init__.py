"""
Core business logic module.

Contains the job status notifier: event parsing, status translation and
the handler that ties lookup, update and diagnostics together.
"""
