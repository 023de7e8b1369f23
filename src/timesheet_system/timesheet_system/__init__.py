"""Timesheet System package.

Feature modules (time_entries, users, reports) sit on top of a pure
time-accounting engine (accounting) with a thin Flask controller layer.
"""
