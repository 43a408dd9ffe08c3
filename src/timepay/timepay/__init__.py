"""Time & pay engine package.

Feature modules (geo, attendance, employees, payroll) expose frozen domain
models, Protocol-based storage ports and service classes; Flask controllers
are a thin layer on top.
"""
