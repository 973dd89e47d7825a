"""
Constants and configuration for the text-mask library.

All values are loaded from environment variables, allowing the deployment
environment to control behaviour without code changes.  Every variable uses
the ``TEXT_MASK_`` prefix.
"""

import os


class _DontChangeMe:
    MAIN_ENV_PREFIX = "TEXT_MASK_"


# Character shown in unfilled slots when the guide is enabled
DEFAULT_PLACEHOLDER = os.environ.get(
    f"{_DontChangeMe.MAIN_ENV_PREFIX}DEFAULT_PLACEHOLDER", "_"
)

# Delay (seconds) before ``on_complete_pattern`` is called, so observers
# see the value after the pending re-render
COMPLETE_PATTERN_DELAY = float(
    os.environ.get(f"{_DontChangeMe.MAIN_ENV_PREFIX}COMPLETE_PATTERN_DELAY", "0.01")
)

# Delay (seconds) before the caret is repositioned after an event
CARET_UPDATE_DELAY = 0.0

# Default logging level
LOG_LEVEL = os.environ.get(
    f"{_DontChangeMe.MAIN_ENV_PREFIX}LOG_LEVEL", "INFO"
).strip()

# Value of the ``autocomplete`` attribute the host input must use
AUTO_COMPLETE = "off"
