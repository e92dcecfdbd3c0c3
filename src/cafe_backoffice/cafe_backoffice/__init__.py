"""Cafe back-office package.

This package is organized by feature modules (employees, attendance, payroll,
service_charge, ...) with a thin Flask controller layer over service/repository
layers. The attendance and service-charge engine is pure: every report is
recomputed from the source records on each call.
"""
