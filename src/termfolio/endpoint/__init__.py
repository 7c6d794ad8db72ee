"""HTTP endpoint module for termfolio.

Hosts one interactive terminal behind a small HTTP API: key presses in,
the rendered output log out (plain text, JSON lines, or an HTML
document), optionally mirrored into a pygame display window.
"""
