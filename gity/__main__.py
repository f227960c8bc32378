"""Allow running gity as `python -m gity`."""

from gity.cli import app

app(prog_name="gity")
