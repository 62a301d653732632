"""

Sprocket Parameters

name: parameters.py
by:   Gumyr
date: October 19th 2026

desc:

    The user supplied description of a sprocket (in inches) and the
    dimensions derived from it and the chain tables (in millimetres).

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
from typing import Optional
from cq_sprocket.dimensions import (
    ChainSizeSpec,
    CHAIN_SIZES,
    inch_to_mm,
    lookup_chain_size,
    lookup_bore_features,
)
from cq_sprocket.tolerances import SETSCREW_HOLE_MARGIN
from cq_sprocket.tooth_profile import (
    sprocket_pitch_radius,
    sprocket_outside_radius,
    sprocket_middle_radius,
)


@dataclass(frozen=True)
class SprocketConfig:
    """
    Description of a sprocket with an optional hub, keyway and setscrews

    Args:
        chain_size (int): chain size code, one of CHAIN_SIZES
        teeth (int): number of teeth, at least 3
        bore_diameter (float): shaft diameter in inches, 0 for no bore
        hub_diameter (float): hub diameter in inches, 0 for no hub. Defaults to 0.
        hub_height (float): total height of the sprocket and hub in inches,
            0 for no hub. Defaults to 0.
        keyway (bool): cut a square keyway into the bore. Defaults to False.
        setscrew (bool): cut a setscrew hole 90° from the keyway. Defaults to False.
        keyway_setscrew (bool): also cut a setscrew hole through the keyway.
            Defaults to False.

    Raises:
        ValueError: teeth isn't an integer greater than 2
        ValueError: chain_size isn't a known size
        ValueError: a dimension is negative
        ValueError: the hub isn't larger than the bore

    Example:

        .. code-block:: python

            config = SprocketConfig(chain_size=25, teeth=9, bore_diameter=5 / 16)

    """

    chain_size: int
    teeth: int
    bore_diameter: float
    hub_diameter: float = 0.0
    hub_height: float = 0.0
    keyway: bool = False
    setscrew: bool = False
    keyway_setscrew: bool = False

    def __post_init__(self):
        if (
            not isinstance(self.teeth, int)
            or isinstance(self.teeth, bool)
            or self.teeth <= 2
        ):
            raise ValueError(
                f"teeth must be an integer greater than 2 not {self.teeth}"
            )
        if not lookup_chain_size(self.chain_size).known:
            raise ValueError(
                f"chain_size {self.chain_size} is unknown, must be one of {CHAIN_SIZES}"
            )
        for name in ["bore_diameter", "hub_diameter", "hub_height"]:
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must not be negative")
        if self.has_hub and self.hub_diameter <= self.bore_diameter:
            raise ValueError(
                f"hub_diameter {self.hub_diameter} must be larger than "
                f"bore_diameter {self.bore_diameter}"
            )

    @property
    def has_hub(self) -> bool:
        """A hub is only built if both its diameter and height are given"""
        return self.hub_diameter > 0 and self.hub_height > 0

    @property
    def chain(self) -> ChainSizeSpec:
        """Dimensions of the chain this sprocket drives"""
        return lookup_chain_size(self.chain_size)


@dataclass(frozen=True)
class DerivedGeometry:
    """Dimensions computed from a SprocketConfig, all lengths in millimetres

    Features that weren't requested, or that the bore is outside the tables
    for, have zero size.
    """

    pitch: float
    roller_radius: float
    thickness: float
    plate_half_width: float
    pitch_radius: float
    outside_radius: float
    middle_radius: float
    bore_radius: float
    hub_radius: float
    hub_height: float
    hub_wall_thickness: float
    hub_usable_height: float
    keyway_width: float
    setscrew_width: float
    setscrew_threads_per_inch: int
    setscrew_hole_length: float

    @property
    def keyway_depth(self) -> float:
        """Depth of the keyway into the hub wall, half the key is in the shaft"""
        return self.keyway_width / 2

    @property
    def setscrew_z(self) -> float:
        """Height of the setscrew axes, midway up the hub above the plate"""
        return self.thickness / 2 + self.hub_usable_height / 2

    @property
    def axial_extent(self) -> float:
        """Length of the sprocket and hub along the axis"""
        return self.thickness + self.hub_height

    @classmethod
    def from_config(
        cls, config: SprocketConfig, chain: Optional[ChainSizeSpec] = None
    ) -> "DerivedGeometry":
        """Derive the geometry of the sprocket described by config"""
        chain = config.chain if chain is None else chain
        features = lookup_bore_features(config.bore_diameter)

        pitch = inch_to_mm(chain.pitch)
        thickness = inch_to_mm(chain.thickness)
        bore_radius = inch_to_mm(config.bore_diameter) / 2
        if config.has_hub:
            hub_radius = inch_to_mm(config.hub_diameter) / 2
            hub_height = inch_to_mm(config.hub_height)
            hub_wall_thickness = hub_radius - bore_radius
            hub_usable_height = hub_height - thickness
        else:
            hub_radius = hub_height = hub_wall_thickness = hub_usable_height = 0.0

        if config.setscrew:
            setscrew_width = inch_to_mm(features.setscrew_width)
            setscrew_threads = features.setscrew_threads_per_inch
        else:
            setscrew_width, setscrew_threads = 0.0, 0
        setscrew_hole_length = (
            hub_wall_thickness + SETSCREW_HOLE_MARGIN
            if setscrew_width > 0 and config.has_hub
            else 0.0
        )

        return cls(
            pitch=pitch,
            roller_radius=inch_to_mm(chain.roller_diameter) / 2,
            thickness=thickness,
            plate_half_width=inch_to_mm(chain.plate_half_width),
            pitch_radius=sprocket_pitch_radius(config.teeth, pitch),
            outside_radius=sprocket_outside_radius(config.teeth, pitch),
            middle_radius=sprocket_middle_radius(config.teeth, pitch),
            bore_radius=bore_radius,
            hub_radius=hub_radius,
            hub_height=hub_height,
            hub_wall_thickness=hub_wall_thickness,
            hub_usable_height=hub_usable_height,
            keyway_width=inch_to_mm(features.keyway_width) if config.keyway else 0.0,
            setscrew_width=setscrew_width,
            setscrew_threads_per_inch=setscrew_threads,
            setscrew_hole_length=setscrew_hole_length,
        )
