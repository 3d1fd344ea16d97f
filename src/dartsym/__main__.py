"""Allow ``python -m dartsym``."""

from dartsym.cli import app

app()
