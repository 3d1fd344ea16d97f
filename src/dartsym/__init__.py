"""dartsym: fuzzy workspace symbol search for Dart projects."""

__version__ = "0.1.0"
