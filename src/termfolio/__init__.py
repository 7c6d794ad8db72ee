"""termfolio -- an interactive line terminal for a portfolio site.

This package implements a small, closed command interpreter that renders
onto a document surface: commands are tokenized and dispatched against a
fixed command table, output is rendered line by line (optionally with a
typewriter animation), history is navigable with Up/Down, Tab completes
command names and arguments, and every printable keystroke plays a short
synthesized click.
"""

__version__ = "0.1.0"
