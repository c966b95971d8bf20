"""Error raised by the native layer for OS failures outside the expected cases."""


class PathyError(RuntimeError):
    """An OS call failed. The message is meant to be shown to the user as-is."""


def describe(exc: OSError) -> str:
    """Platform error text for exc, falling back to str() when there is no errno."""
    return exc.strerror or str(exc)
