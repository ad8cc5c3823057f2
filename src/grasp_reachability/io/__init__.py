"""Import definitions used for logging and configuration input."""

from .logging import console as console
from .logging import log_info as log_info
from .logging import log_warning as log_warning
