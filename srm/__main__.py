"""Allow ``python -m srm``."""

from srm.cli import app

app(prog_name="srm")
