"""
Only the root tests directory has an __init__.py.

It makes `tests` an importable package, so test modules can use `tests.helpers`. The
subdirectories work as namespace packages (PEP 420) and need no __init__.py.
"""
