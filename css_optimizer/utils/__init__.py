"""Utilities for CSS Optimizer."""
