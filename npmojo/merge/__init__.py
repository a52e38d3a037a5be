"""
Merge subpackage for the NP-MOJO detector: consolidation across lags and across bandwidths.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from npmojo.merge.multilag import CandidateCluster, merge_bottom_up, merge_multilag, merge_sequential
from npmojo.merge.multiscale import merge_multiscale, pool_by_bandwidth

__all__ = [
    "CandidateCluster",
    "merge_bottom_up",
    "merge_multilag",
    "merge_multiscale",
    "merge_sequential",
    "pool_by_bandwidth",
]
