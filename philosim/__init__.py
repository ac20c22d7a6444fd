"""Threaded simulation of the dining philosophers problem: settings, table and command line."""

__version__ = "0.1.0"