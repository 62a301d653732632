"""

Sprocket Bore and Hub Features

name: features.py
by:   Gumyr
date: October 19th 2026

desc:

    CSG trees for the features added to or cut from a sprocket plate:
    the central bore, a square keyway, the hub and the threaded setscrew
    holes through the hub wall. The keyway is always on the -X side of the
    bore and the main setscrew on the +Y axis.

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
from typing import Optional
from cq_sprocket.csg import Node, Cylinder, Box, Thread, union
from cq_sprocket.tolerances import PrintTolerances


def build_bore_cutter(
    bore_radius: float,
    axial_extent: float,
    z_start: float = 0.0,
    tolerances: Optional[PrintTolerances] = None,
) -> Optional[Node]:
    """
    Create the cylinder that cuts the central bore

    Args:
        bore_radius (float): radius of the shaft
        axial_extent (float): length of the cutter along Z
        z_start (float, optional): Z position of the bottom of the cutter. Defaults to 0.
        tolerances (PrintTolerances, optional): fudge distances. Defaults to PrintTolerances().

    Returns:
        Optional[Node]: the cutter or None if there is no bore
    """
    if bore_radius <= 0:
        return None
    tolerances = PrintTolerances() if tolerances is None else tolerances
    return Cylinder(bore_radius + tolerances.bore, axial_extent).translate(0, 0, z_start)


def keyway_outer_edge(
    keyway_width: float, bore_radius: float, tolerances: PrintTolerances
) -> float:
    """X position of the keyway face furthest into the hub"""
    return -(bore_radius + tolerances.bore + keyway_width / 2)


def build_keyway_cutter(
    keyway_width: float,
    bore_radius: float,
    axial_extent: float,
    z_start: float = 0.0,
    tolerances: Optional[PrintTolerances] = None,
) -> Optional[Node]:
    """
    Create the square prism that cuts a keyway into the -X side of the bore

    Half of the key sits in the hub, so the outer face of the keyway is
    keyway_width/2 beyond the (fudged) bore surface.

    Returns:
        Optional[Node]: the cutter or None if keyway_width is zero
    """
    if keyway_width <= 0:
        return None
    tolerances = PrintTolerances() if tolerances is None else tolerances
    side = keyway_width + tolerances.keyway
    return Box(side, side, axial_extent).translate(
        keyway_outer_edge(keyway_width, bore_radius, tolerances), -side / 2, z_start
    )


def build_hub(hub_radius: float, hub_height: float, z_start: float = 0.0) -> Optional[Node]:
    """The hub cylinder, or None if either dimension is zero"""
    if hub_radius <= 0 or hub_height <= 0:
        return None
    return Cylinder(hub_radius, hub_height).translate(0, 0, z_start)


def build_setscrew_cutters(
    width: float,
    threads_per_inch: float,
    length: float,
    start_radius: float,
    z_center: float,
    include_keyway_axis: bool = False,
) -> Optional[Node]:
    """
    Create the threaded setscrew hole cutters

    One hole is always cut on the +Y axis, 90° from the keyway. A second hole
    on the keyway (-X) axis is added if include_keyway_axis is True.

    Args:
        width (float): setscrew major diameter
        threads_per_inch (float): setscrew thread density
        length (float): length of each hole cutter
        start_radius (float): distance from the sprocket axis to the inner end of the holes
        z_center (float): height of the hole axes
        include_keyway_axis (bool, optional): also cut a hole through the keyway.
            Defaults to False.

    Returns:
        Optional[Node]: the cutters or None if width is zero
    """
    if width <= 0 or threads_per_inch <= 0:
        return None
    hole = (
        Thread(width, threads_per_inch, length)
        .translate(0, 0, start_radius)
        .rotate(-90, (1, 0, 0))
        .translate(0, 0, z_center)
    )
    keyway_hole = hole.rotate(90) if include_keyway_axis else None
    return union(hole, keyway_hole)
