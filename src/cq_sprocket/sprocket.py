"""

Parametric Hub Sprockets

name: sprocket.py
by:   Gumyr
date: October 19th 2026

desc:

    This python/cadquery code is a parameterized sprocket generator for
    standard roller chain. Given a chain size, a number of teeth and a bore
    a sprocket centered on the origin is generated, optionally with a hub,
    a keyway and threaded setscrew holes:

        plate ∪ hub − (bore ∪ keyway ∪ setscrew holes)

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
import logging
from typing import List, Optional, Tuple
from OCP.BRepBuilderAPI import BRepBuilderAPI_Copy
from cadquery import Solid, Shape
from cq_sprocket.csg import Node, Difference, ThreadMaker, evaluate, union
from cq_sprocket.clearance import ClearanceWarning, validate
from cq_sprocket.features import (
    build_bore_cutter,
    build_keyway_cutter,
    build_hub,
    build_setscrew_cutters,
)
from cq_sprocket.parameters import SprocketConfig, DerivedGeometry
from cq_sprocket.thread import generate_internal_thread
from cq_sprocket.tolerances import (
    PrintTolerances,
    ClearanceLimits,
    AXIAL_MARGIN,
    SETSCREW_HOLE_MARGIN,
)
from cq_sprocket.tooth_profile import build_plate, sprocket_circumference

logger = logging.getLogger("cq_sprocket")


def build_sprocket_tree(
    config: SprocketConfig,
    tolerances: Optional[PrintTolerances] = None,
    derived: Optional[DerivedGeometry] = None,
) -> Node:
    """
    Describe a sprocket as a CSG tree without building any geometry

    Args:
        config (SprocketConfig): sprocket description
        tolerances (PrintTolerances, optional): fudge distances. Defaults to PrintTolerances().
        derived (DerivedGeometry, optional): geometry derived from config.
            Defaults to DerivedGeometry.from_config(config).

    Returns:
        Node: root of the tree, a Difference if anything is cut from the plate
    """
    tolerances = PrintTolerances() if tolerances is None else tolerances
    derived = DerivedGeometry.from_config(config) if derived is None else derived

    plate = build_plate(
        derived.pitch,
        derived.roller_radius,
        derived.thickness,
        config.teeth,
        tolerances,
    )
    hub = build_hub(derived.hub_radius, derived.hub_height, -derived.thickness / 2)
    body = union(plate, hub)

    z_start = -derived.thickness / 2 - AXIAL_MARGIN
    axial_extent = derived.axial_extent + 2 * AXIAL_MARGIN
    bore = build_bore_cutter(derived.bore_radius, axial_extent, z_start, tolerances)

    if config.keyway and derived.keyway_width == 0:
        logger.debug(
            "no keyway for a %s bore, outside the keyway table", config.bore_diameter
        )
    keyway = build_keyway_cutter(
        derived.keyway_width, derived.bore_radius, axial_extent, z_start, tolerances
    )

    setscrews = None
    if config.setscrew:
        if derived.setscrew_width == 0:
            logger.debug(
                "no setscrew for a %s bore, outside the setscrew table",
                config.bore_diameter,
            )
        elif not config.has_hub:
            logger.debug("no setscrew without a hub")
        else:
            setscrews = build_setscrew_cutters(
                derived.setscrew_width,
                derived.setscrew_threads_per_inch,
                derived.setscrew_hole_length,
                derived.bore_radius - SETSCREW_HOLE_MARGIN / 2,
                derived.setscrew_z,
                include_keyway_axis=config.keyway_setscrew,
            )

    cutters = tuple(c for c in [bore, keyway, setscrews] if c is not None)
    if not cutters:
        return body
    return Difference(body, (union(*cutters),))


def generate_sprocket(
    config: SprocketConfig,
    tolerances: Optional[PrintTolerances] = None,
    limits: Optional[ClearanceLimits] = None,
    thread_maker: ThreadMaker = generate_internal_thread,
) -> Tuple[Shape, List[ClearanceWarning]]:
    """
    Create a sprocket and check it for clearance problems

    Clearance problems never stop the sprocket from being built, they are
    returned (and logged) so the caller can decide what to do.

    Args:
        config (SprocketConfig): sprocket description, dimensions in inches
        tolerances (PrintTolerances, optional): fudge distances. Defaults to PrintTolerances().
        limits (ClearanceLimits, optional): clearance limits. Defaults to ClearanceLimits().
        thread_maker (ThreadMaker, optional): creates the setscrew hole cutters.
            Defaults to generate_internal_thread.

    Returns:
        Tuple[Shape, List[ClearanceWarning]]: the sprocket in millimetres and any warnings

    Example:

        .. code-block:: python

            sprocket, warnings = generate_sprocket(
                SprocketConfig(chain_size=40, teeth=15, bore_diameter=0.5)
            )
            cq.exporters.export(sprocket, "sprocket.step")

    """
    derived = DerivedGeometry.from_config(config)
    warnings = validate(config, derived, limits)
    for warning in warnings:
        logger.warning(warning.message)
    tree = build_sprocket_tree(config, tolerances, derived)
    return (evaluate(tree, thread_maker), warnings)


class Sprocket(Solid):
    """
    Create a new sprocket object as defined by the given configuration

    Args:
        config (SprocketConfig): sprocket description, dimensions in inches
        tolerances (PrintTolerances, optional): fudge distances. Defaults to PrintTolerances().
        limits (ClearanceLimits, optional): clearance limits. Defaults to ClearanceLimits().
        thread_maker (ThreadMaker, optional): creates the setscrew hole cutters.
            Defaults to generate_internal_thread.

    Attributes:
        derived (DerivedGeometry): the dimensions of the sprocket in mm
        warnings (list[ClearanceWarning]): clearance problems found
        pitch_radius (float): radius of the circle formed by the center of the chain rollers
        outer_radius (float): size of the sprocket from center to tip of the teeth
        pitch_circumference (float): circumference of the sprocket at the pitch radius

    Example:

        .. doctest::

            >>> s = Sprocket(SprocketConfig(chain_size=25, teeth=9, bore_diameter=5 / 16))
            >>> print(round(s.pitch_radius, 3))
            9.283

    """

    @property
    def pitch_radius(self) -> float:
        """The radius of the circle formed by the center of the chain rollers"""
        return self.derived.pitch_radius

    @property
    def outer_radius(self) -> float:
        """The size of the sprocket from center to tip of the teeth"""
        return self.derived.outside_radius

    @property
    def pitch_circumference(self) -> float:
        """The circumference of the sprocket at the pitch radius"""
        return sprocket_circumference(self.config.teeth, self.derived.pitch)

    def __init__(
        self,
        config: SprocketConfig,
        tolerances: Optional[PrintTolerances] = None,
        limits: Optional[ClearanceLimits] = None,
        thread_maker: ThreadMaker = generate_internal_thread,
    ):
        self.config = config
        self.tolerances = PrintTolerances() if tolerances is None else tolerances
        self.limits = ClearanceLimits() if limits is None else limits
        self.thread_maker = thread_maker
        self.derived = DerivedGeometry.from_config(config)
        cq_object, self.warnings = generate_sprocket(
            config, self.tolerances, self.limits, thread_maker
        )
        super().__init__(cq_object.wrapped)

    def copy(self) -> "Sprocket":
        """Duplicate the sprocket without rebuilding its geometry"""
        sprocket_copy = Sprocket.__new__(Sprocket)
        sprocket_copy.config = self.config
        sprocket_copy.tolerances = self.tolerances
        sprocket_copy.limits = self.limits
        sprocket_copy.thread_maker = self.thread_maker
        sprocket_copy.derived = self.derived
        sprocket_copy.warnings = list(self.warnings)
        Solid.__init__(sprocket_copy, BRepBuilderAPI_Copy(self.wrapped).Shape())
        sprocket_copy.forConstruction = self.forConstruction
        sprocket_copy.label = self.label
        return sprocket_copy
