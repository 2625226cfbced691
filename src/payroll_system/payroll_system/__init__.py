"""Payroll System package.

This package is organized by feature modules (attendance, employees, payroll, ...)
with a pure calculation core and thin service/repository layers around it.
"""
