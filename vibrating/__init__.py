__path__ = __import__("pkgutil").extend_path(__path__, __name__)  # NOQA: F-821
__title__ = 'vibrating'
__license__ = 'MIT'
# Placeholder, modified by dynamic-versioning.
__version__ = "0.0.0"

from .arguments import *
from .conversions import *
from .faults import *
from .matching import *
from .parsing import *
from .shell import *
from .usage import *

VersionInfo = __import__("collections").namedtuple("VersionInfo", (
    "major",
    "minor",
    "micro",
    "releaselevel",
    "serial",
    "metadata"
))

# Placeholder, modified by dynamic-versioning.
version_info = VersionInfo(0, 0, 0, "final", 0, "")

__all__ = (
    "__path__",
    "__title__",
    "__license__",
    "__version__",
    "version_info"
)

# Load the exposed API of the descriptors
__all__ += arguments.__all__  # type: ignore[attr-defined]
# Load the exposed API of the value conversions
__all__ += conversions.__all__  # type: ignore[attr-defined]
# Load the exposed API of the faults
__all__ += faults.__all__  # type: ignore[attr-defined]
# Load the exposed API of the matcher
__all__ += matching.__all__  # type: ignore[attr-defined]
# Load the exposed API of the parser
__all__ += parsing.__all__  # type: ignore[attr-defined]
# Load the exposed API of the runner
__all__ += shell.__all__  # type: ignore[attr-defined]
# Load the exposed API of the usage formatter
__all__ += usage.__all__  # type: ignore[attr-defined]
