"""ftg — file tree generator writing a markdown drawing of a directory."""

__version__ = "1.0.1"

AUTHOR = "https://github.com/easttexaselectronics"
REPOSITORY = (
    "https://github.com/EastTexasElectronics/File-Tree-Generator-Multiverse/tree/main/Go"
)
DONATION = REPOSITORY


class FtgError(Exception):
    """User-facing fatal error.

    Raised for an unreadable root directory, an output file that cannot be
    created, and unsupported modes. The message is printed to stderr
    and the process exits with code 1.
    """
