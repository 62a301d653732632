"""

Print Tolerances and Clearance Limits

name: tolerances.py
by:   Gumyr
date: October 19th 2026

desc:

    Tunable allowances applied while building sprocket geometry and the
    limits used when checking a sprocket for clearance problems.

license:

    Copyright 2026 Gumyr

    Licensed under the Apache License, Version 2.0 (the "License");
    you may not use this file except in compliance with the License.
    You may obtain a copy of the License at

        http://www.apache.org/licenses/LICENSE-2.0

    Unless required by applicable law or agreed to in writing, software
    distributed under the License is distributed on an "AS IS" BASIS,
    WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
    See the License for the specific language governing permissions and
    limitations under the License.

"""
from dataclasses import dataclass
from cq_sprocket.dimensions import MM, INCH

# Gap between the chain link plates and the hub, inches
MIN_CHAIN_CLEARANCE = 1 / 16
# Fewest full threads a setscrew may engage in the hub wall
MIN_SETSCREW_THREADS = 3
# Extra length on the setscrew hole cutters so they pass through the hub wall
SETSCREW_HOLE_MARGIN = 0.1 * INCH
# Extra axial length on the bore and keyway cutters
AXIAL_MARGIN = 1 * MM


@dataclass(frozen=True)
class PrintTolerances:
    """Fudge distances compensating for printer and tessellation error

    Args:
        bore (float): bore radius increase. Defaults to 0.2 mm.
        roller (float): roller seat radius increase. Defaults to 0.1 mm.
        teeth (float): tooth flank reduction and flank center nudge. Defaults to 0.
        keyway (float): keyway side increase. Defaults to 0.2 mm.

    All values are in millimetres.
    """

    bore: float = 0.2 * MM
    roller: float = 0.1 * MM
    teeth: float = 0.0 * MM
    keyway: float = 0.2 * MM

    def __post_init__(self):
        for name in ["bore", "roller", "teeth", "keyway"]:
            if getattr(self, name) < 0:
                raise ValueError(f"{name} tolerance must not be negative")


@dataclass(frozen=True)
class ClearanceLimits:
    """Limits used to flag sprockets that can't be assembled or fastened

    Args:
        min_chain_clearance (float): gap in inches required between the hub
            and the chain link plates. Defaults to MIN_CHAIN_CLEARANCE.
        min_setscrew_threads (float): number of threads a setscrew must engage.
            Defaults to MIN_SETSCREW_THREADS.
    """

    min_chain_clearance: float = MIN_CHAIN_CLEARANCE
    min_setscrew_threads: float = MIN_SETSCREW_THREADS
