"""pathy: inspect and edit PATH and similar environment variables."""

PROGNAME = "pathy"
__version__ = "0.1.0"
