"""
Bootstrap subpackage for the NP-MOJO detector: dependent multipliers and threshold calibration.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from npmojo.bootstrap.calibrate import calibrate, replicate_maxima
from npmojo.bootstrap.multipliers import default_boot_dep, multipliers

__all__ = ["calibrate", "default_boot_dep", "multipliers", "replicate_maxima"]
