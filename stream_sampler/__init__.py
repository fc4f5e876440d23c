"""
Representative byte-stream sampling.

This package provides:
- algorithms: exact frequency counting, cumulative-rank offset resolution
- utils: byte formatting, composition report, logging setup
- sampling_pipeline: count -> draw -> resolve -> write for one input
"""

from .errors import InvalidArgument, InvariantViolation, ReadFailure, StreamSamplerError
from .sampling_pipeline import SamplingPipeline

__all__ = [
    "SamplingPipeline",
    "StreamSamplerError",
    "InvalidArgument",
    "ReadFailure",
    "InvariantViolation",
]
