"""Concurrent, depth- and deadline-bounded word-frequency crawler."""
