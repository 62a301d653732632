"""

Sprocket Clearance Checks

name: clearance.py
by:   Gumyr
date: October 19th 2026

desc:

    Checks that a sprocket can be assembled with its chain and that its
    setscrews have enough material to hold. Problems are reported as
    ClearanceWarning records, the sprocket is still built.

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
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Dict, List, Optional
from cq_sprocket.dimensions import mm_to_inch
from cq_sprocket.parameters import SprocketConfig, DerivedGeometry
from cq_sprocket.tolerances import ClearanceLimits


class WarningKind(Enum):
    """Type of clearance problem"""

    CHAIN_CLEARANCE = auto()
    SETSCREW_HEIGHT = auto()
    SETSCREW_THREADS = auto()


@dataclass(frozen=True)
class ClearanceWarning:
    """A clearance problem and the values, in inches, that describe it"""

    kind: WarningKind
    message: str
    context: Dict[str, float] = field(default_factory=dict)

    def __str__(self) -> str:
        return self.message


def check_chain_clearance(
    config: SprocketConfig, derived: DerivedGeometry, limits: ClearanceLimits
) -> Optional[ClearanceWarning]:
    """Does the hub stay clear of the chain link plates"""
    if not config.has_hub:
        return None
    clearance = mm_to_inch(
        derived.pitch_radius - derived.hub_radius - derived.plate_half_width
    )
    if clearance >= limits.min_chain_clearance:
        return None
    max_hub_diameter = 2 * (
        mm_to_inch(derived.pitch_radius - derived.plate_half_width)
        - limits.min_chain_clearance
    )
    return ClearanceWarning(
        kind=WarningKind.CHAIN_CLEARANCE,
        message=(
            f"Hub diameter {config.hub_diameter:.4f} leaves {clearance:.4f} clearance "
            f"to the chain, maximum hub diameter is {max_hub_diameter:.4f}"
        ),
        context={
            "clearance": clearance,
            "hub_diameter": config.hub_diameter,
            "max_hub_diameter": max_hub_diameter,
        },
    )


def check_setscrew_height(
    config: SprocketConfig, derived: DerivedGeometry, limits: ClearanceLimits
) -> Optional[ClearanceWarning]:
    """Is the hub tall enough above the plate for the setscrew"""
    if derived.setscrew_width <= 0 or derived.setscrew_width <= derived.hub_usable_height:
        return None
    min_hub_height = mm_to_inch(derived.thickness + derived.setscrew_width)
    return ClearanceWarning(
        kind=WarningKind.SETSCREW_HEIGHT,
        message=(
            f"Hub height {config.hub_height:.4f} is too short for a "
            f"{mm_to_inch(derived.setscrew_width):.4f} setscrew, "
            f"minimum hub height is {min_hub_height:.4f}"
        ),
        context={
            "setscrew_width": mm_to_inch(derived.setscrew_width),
            "hub_height": config.hub_height,
            "min_hub_height": min_hub_height,
        },
    )


def check_setscrew_threads(
    config: SprocketConfig, derived: DerivedGeometry, limits: ClearanceLimits
) -> Optional[ClearanceWarning]:
    """Does the hub wall hold enough threads, also beside the keyway if there is one"""
    threads_per_inch = derived.setscrew_threads_per_inch
    if derived.setscrew_width <= 0 or threads_per_inch <= 0:
        return None
    bore_radius = mm_to_inch(derived.bore_radius)
    needed_wall = limits.min_setscrew_threads / threads_per_inch

    for keyway_depth in [0.0, mm_to_inch(derived.keyway_depth)]:
        wall = mm_to_inch(derived.hub_wall_thickness) - keyway_depth
        threads = threads_per_inch * wall
        if threads < limits.min_setscrew_threads:
            min_hub_diameter = 2 * (bore_radius + keyway_depth + needed_wall)
            beside_keyway = " beside the keyway" if keyway_depth > 0 else ""
            return ClearanceWarning(
                kind=WarningKind.SETSCREW_THREADS,
                message=(
                    f"Insufficient setscrew threads{beside_keyway}: {threads:.2f} "
                    f"of {limits.min_setscrew_threads}, "
                    f"minimum hub diameter is {min_hub_diameter:.4f}"
                ),
                context={
                    "threads": threads,
                    "keyway_depth": keyway_depth,
                    "hub_diameter": config.hub_diameter,
                    "min_hub_diameter": min_hub_diameter,
                },
            )
    return None


def validate(
    config: SprocketConfig,
    derived: Optional[DerivedGeometry] = None,
    limits: Optional[ClearanceLimits] = None,
) -> List[ClearanceWarning]:
    """
    Check a sprocket for clearance problems

    Args:
        config (SprocketConfig): sprocket description
        derived (DerivedGeometry, optional): geometry derived from config.
            Defaults to DerivedGeometry.from_config(config).
        limits (ClearanceLimits, optional): minimum clearances.
            Defaults to ClearanceLimits().

    Returns:
        List[ClearanceWarning]: at most one warning from each check
    """
    derived = DerivedGeometry.from_config(config) if derived is None else derived
    limits = ClearanceLimits() if limits is None else limits
    checks = [check_chain_clearance, check_setscrew_height, check_setscrew_threads]
    return [
        warning
        for warning in (check(config, derived, limits) for check in checks)
        if warning is not None
    ]
