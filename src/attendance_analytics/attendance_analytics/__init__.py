"""Attendance Analytics package.

Organized by feature modules (attendance, students, analytics) with a thin
Flask controller layer over service/repository layers.
"""
