"""Shared skill runtime, types and developer harness."""
