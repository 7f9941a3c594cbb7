"""Timesheet Report package.

Organized by feature modules (entries, summary, report, pipeline) with a
small dependency container wiring the services together.
"""
