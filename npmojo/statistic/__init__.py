"""
Statistic subpackage for the NP-MOJO detector: lag embedding and the moving-sum kernel statistic.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from npmojo.statistic.embedding import lag_embed
from npmojo.statistic.mosum import StatisticSeries, mosum_statistic

__all__ = ["StatisticSeries", "lag_embed", "mosum_statistic"]
