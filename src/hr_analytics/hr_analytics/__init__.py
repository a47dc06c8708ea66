"""HR Analytics package.

This package is organized by feature modules (employees, burnout, ...)
with a thin Flask controller layer and SOLID service/repository layers.
"""
