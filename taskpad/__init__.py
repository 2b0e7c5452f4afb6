"""Taskpad - a single-screen task list backed by a relational store."""

__version__ = "0.1.0"
