"""Shortest-path algorithms and their supporting data structures."""
