"""Timesheet System package.

Feature modules (time_entries, users, payroll, ...) keep the hours arithmetic
in pure services; Flask controllers and MySQL repositories are thin adapters.
"""
