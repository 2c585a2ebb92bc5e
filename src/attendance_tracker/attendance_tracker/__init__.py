"""Attendance Tracker package.

This package is organized by feature modules (attendance, leaves, goals, ...)
with a thin Flask controller layer over pure domain logic and a key-value
storage layer.
"""
