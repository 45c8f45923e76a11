"""Library version information."""

VERSION_MAJOR = 1
VERSION_MINOR = 0
VERSION_PATCH = 0

VERSION = (VERSION_MAJOR, VERSION_MINOR, VERSION_PATCH)


def get_version_string() -> str:
    """Return the human-readable library version string."""
    return "JsonX v{}.{}.{}".format(*VERSION)