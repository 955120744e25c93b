"""Monetary domain package.

This package contains classes for handling monetary amounts and currencies, including
the closed ISO 4217 currency registry and `Money` calculations with proper precision
arithmetic.
"""
