from .frequency_counter import FrequencyCounter, FrequencyTable, count_frequencies
from .representative_sampler import CumulativeRanks, RepresentativeSampler, representative_sample

__all__ = [
    "FrequencyCounter",
    "FrequencyTable",
    "count_frequencies",
    "CumulativeRanks",
    "RepresentativeSampler",
    "representative_sample",
]
