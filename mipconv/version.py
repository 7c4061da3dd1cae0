"""Program version."""

_VERSION = "mipconv 2.6.0"


def mipconv_version() -> str:
    """Return the program name and version."""
    return _VERSION