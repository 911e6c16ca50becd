"""Runnable example scenes built on raykernel."""
