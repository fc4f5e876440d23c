from .byte_handler import format_byte
from .composition import composition_frame
from .logging_config import configure_logging

__all__ = ["format_byte", "composition_frame", "configure_logging"]
