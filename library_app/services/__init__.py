# File: library_app/services/__init__.py

# This file makes 'services' a Python package.
