"""Pupils, teachers and lessons for private tutoring, with pricing, repositories and a console."""

__version__ = "0.1.0"