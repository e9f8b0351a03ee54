"""Geo Attendance package.

Attendance tracking backend organized by feature modules (users, attendance,
settings, reports, ...) with a thin Flask JSON controller layer on top of
service/repository layers.
"""
