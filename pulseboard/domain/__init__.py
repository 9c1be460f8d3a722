"""Domain layer for Pulseboard.

Pure models and functions: no I/O, no side effects. Everything here
takes a snapshot in and returns derived values out.
"""
