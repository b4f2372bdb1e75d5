"""Adapters layer - Concrete implementations of ports.

This module contains implementations of the port interfaces,
connecting the application to its data sources:
- Train network storage (CSV files)
"""
