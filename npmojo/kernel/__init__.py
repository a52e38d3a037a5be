"""
Kernel subpackage for the NP-MOJO detector.

Re-exports the pointwise kernel evaluator, the banded kernel table used by the
moving-sum statistic and the data-driven scale selection.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from npmojo.kernel.functions import WindowBlocks, evaluate, kernel_band
from npmojo.kernel.heuristic import median_distance, resolve_scale

__all__ = ["WindowBlocks", "evaluate", "kernel_band", "median_distance", "resolve_scale"]
