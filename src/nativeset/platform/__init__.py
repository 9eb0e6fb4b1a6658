"""
Host platform layer.

The raw OS name and CPU architecture of the running process are read once,
here, at import time. Everything else in this package works on plain strings
so it can be exercised for hosts other than the current one.
"""

import platform as _platform

# Raw host strings as reported by the interpreter
HOST_OS_NAME = _platform.system()
HOST_ARCH = _platform.machine()
