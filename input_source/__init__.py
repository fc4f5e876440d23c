from .base_input_source import BaseInputSource
from .stream_input_source import StreamInputSource
from .generated_input_source import ALPHABET, GeneratedInputSource, generate_random_bytes

__all__ = ['BaseInputSource', 'StreamInputSource', 'GeneratedInputSource', 'generate_random_bytes', 'ALPHABET']
