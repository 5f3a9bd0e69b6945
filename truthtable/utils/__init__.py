from .logger import get_logger, use_sink
from .cache import TableCache

__all__ = ["get_logger", "use_sink", "TableCache"]
