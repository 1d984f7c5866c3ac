"""Timesheet Engine package.

This package is organized by feature modules (policy, entries, payroll, ...)
with a thin Flask controller layer on top of pure computation services.
"""
