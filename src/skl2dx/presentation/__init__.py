"""Presentation layer: command-line interfaces."""
