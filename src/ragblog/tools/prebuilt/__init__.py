"""Reusable building blocks for tools that reach outside the process."""
