"""Debug handler - Main Entry Point.

Pipes standard input through the debug handler, e.g.::

    GRIG_DEBUG_LEVEL=4 rigctl -vvvv f 2>&1 | grig-debug
"""

import sys
from .config import DEBUG_LEVEL, DEBUG_LOG_FILE, RIG_LOGGER_NAME
from .adapters import PyLoggingAdapter
from .debug_sink import DebugSink
from .interfaces import Severity


def main() -> int:
    """Forward stdin lines as VERBOSE application messages."""
    # Validate config (early return)
    if not Severity.NONE <= DEBUG_LEVEL <= Severity.TRACE:
        print(f"ERROR: GRIG_DEBUG_LEVEL out of range: {DEBUG_LEVEL}",
              file=sys.stderr)
        return 1

    # Mount adapters
    collaborator = PyLoggingAdapter(RIG_LOGGER_NAME)
    sink = DebugSink(collaborator)
    sink.set_level(DEBUG_LEVEL)
    sink.init(DEBUG_LOG_FILE or None)

    try:
        for line in sys.stdin:
            sink.log(Severity.VERBOSE, "%s", line)
    except KeyboardInterrupt:
        sink.log(Severity.WARN, "Interrupted")
    finally:
        sink.close()

    return 0


if __name__ == "__main__":
    sys.exit(main())
