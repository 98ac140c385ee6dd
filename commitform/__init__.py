"""Interactive structured commit message composer."""

import os
from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("commitform")
except PackageNotFoundError:
    # Fallback for development mode
    __version__ = "0.0.0-dev"

# Build revision, injected by release tooling
__revision__ = os.environ.get("COMMITFORM_REVISION", "HEAD")
