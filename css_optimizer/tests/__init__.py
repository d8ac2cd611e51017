"""Tests for CSS Optimizer."""
