"""
Change point subpackage for the NP-MOJO detector.

This module re-exports the :class:`CandidatePoint` dataclass and the
:func:`extract` function from :mod:`npmojo.changepoint.extraction`, giving
consumers a clean import path of ``npmojo.changepoint`` for turning a detector
statistic into candidate change points.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from npmojo.changepoint.extraction import CandidatePoint, exceeding_environments, extract

__all__ = ["CandidatePoint", "exceeding_environments", "extract"]
