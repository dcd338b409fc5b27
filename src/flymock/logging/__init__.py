"""FlyMock Logging — structlog output for the ``flymock`` logger namespace."""

from flymock.logging.port import LoggingPort
from flymock.logging.structlog_adapter import StructlogAdapter, configure_logging, get_logger

__all__ = ["LoggingPort", "StructlogAdapter", "configure_logging", "get_logger"]
