"""Test data generators."""
