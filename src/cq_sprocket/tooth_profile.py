"""

Sprocket Plate Tooth Profile

name: tooth_profile.py
by:   Gumyr
date: October 19th 2026

desc:

    Builds the toothed plate of a roller chain sprocket. Each tooth is
    approximated by the lens formed by two flank circles centered on the
    adjacent roller seats, the root between teeth is filled, the tips are
    trimmed to the outer envelope and finally the roller seats are cut.

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
from math import sin, cos, tan, radians, sqrt, pi
from typing import Optional
from cq_sprocket.csg import Node, Cylinder, Box, Difference, Intersection, Union
from cq_sprocket.tolerances import PrintTolerances, AXIAL_MARGIN


def sprocket_pitch_radius(num_teeth: int, chain_pitch: float) -> float:
    """
    Calculate and return the pitch radius of a sprocket with the given number of teeth
                            and chain pitch

    Parameters
    ----------
    num_teeth : int
        the number of teeth on the perimeter of the sprocket
    chain_pitch : float
        the distance between two adjacent pins in a single link
    """
    return chain_pitch / (2 * sin(radians(180 / num_teeth)))


def sprocket_outside_radius(num_teeth: int, chain_pitch: float) -> float:
    """The theoretical tip radius of the teeth"""
    return chain_pitch * (0.6 + 1 / tan(radians(180 / num_teeth))) / 2


def sprocket_middle_radius(num_teeth: int, chain_pitch: float) -> float:
    """Distance from the center to the chord joining two adjacent roller centers"""
    return sqrt(sprocket_pitch_radius(num_teeth, chain_pitch) ** 2 - (chain_pitch / 2) ** 2)


def sprocket_circumference(num_teeth: int, chain_pitch: float) -> float:
    """The circumference of the sprocket at the pitch radius"""
    return 2 * pi * sprocket_pitch_radius(num_teeth, chain_pitch)


def flank_radius(
    chain_pitch: float, roller_radius: float, tolerances: PrintTolerances
) -> float:
    """Radius of the arc forming each side of a tooth

    Flanks are centered on adjacent roller seats one pitch apart, so the radius
    must exceed half the pitch for them to overlap; subtracting the full roller
    diameter instead of the radius leaves no tooth on common chain sizes.
    """
    return chain_pitch - roller_radius - tolerances.roller - tolerances.teeth


def trim_radius(num_teeth: int, chain_pitch: float, roller_radius: float) -> float:
    """Radius of the envelope the tooth tips are clipped to"""
    return (
        sprocket_pitch_radius(num_teeth, chain_pitch) - roller_radius + chain_pitch / 2
    )


def tooth_angle(num_teeth: int) -> float:
    """Angle in degrees between adjacent teeth"""
    return 360 / num_teeth


def make_tooth_wedge(
    num_teeth: int,
    chain_pitch: float,
    roller_radius: float,
    thickness: float,
    tolerances: PrintTolerances,
) -> Node:
    """
    Create the lens shaped tooth between the roller seat on the +Y axis and the
    next seat counter clockwise

    The flank cylinders are nudged toward each other by the tooth tolerance, which
    combined with the reduced flank radius keeps the tooth width at the pitch line
    while lowering the tip.
    """
    angle = tooth_angle(num_teeth)
    half_angle = radians(angle / 2)
    pitch_rad = sprocket_pitch_radius(num_teeth, chain_pitch)
    nudge = tolerances.teeth
    flank = Cylinder(flank_radius(chain_pitch, roller_radius, tolerances), thickness)
    left = flank.translate(
        -nudge * cos(half_angle), pitch_rad - nudge * sin(half_angle), -thickness / 2
    )
    right = flank.translate(
        nudge * cos(half_angle), pitch_rad - nudge * sin(half_angle), -thickness / 2
    ).rotate(angle)
    return Intersection((left, right))


def make_root_filler(
    num_teeth: int, chain_pitch: float, thickness: float
) -> Node:
    """
    Create a block from the center of the sprocket to just past the middle radius,
    centered on the +Y axis, filling the root between two teeth
    """
    pitch_rad = sprocket_pitch_radius(num_teeth, chain_pitch)
    middle_rad = sprocket_middle_radius(num_teeth, chain_pitch)
    height = (middle_rad + pitch_rad) / 2
    return Box(chain_pitch, height, thickness).translate(
        -chain_pitch / 2, 0, -thickness / 2
    )


def make_roller_seat(
    num_teeth: int,
    chain_pitch: float,
    roller_radius: float,
    thickness: float,
    tolerances: PrintTolerances,
) -> Node:
    """Create the cylinder that carves the roller seat on the +Y axis"""
    pitch_rad = sprocket_pitch_radius(num_teeth, chain_pitch)
    return Cylinder(roller_radius + tolerances.roller, thickness + 2 * AXIAL_MARGIN).translate(
        0, pitch_rad, -thickness / 2 - AXIAL_MARGIN
    )


def build_plate(
    chain_pitch: float,
    roller_radius: float,
    thickness: float,
    num_teeth: int,
    tolerances: Optional[PrintTolerances] = None,
) -> Node:
    """
    Create the toothed plate of a sprocket

    The plate is centered on the origin with its axis of rotation on Z and a
    roller seat on the +Y axis.

    Args:
        chain_pitch (float): distance between the centers of two adjacent rollers
        roller_radius (float): radius of the chain rollers
        thickness (float): thickness of the plate
        num_teeth (int): number of teeth on the perimeter of the sprocket
        tolerances (PrintTolerances, optional): fudge distances. Defaults to PrintTolerances().

    Returns:
        Node: CSG tree of the plate
    """
    tolerances = PrintTolerances() if tolerances is None else tolerances
    angle = tooth_angle(num_teeth)

    wedge = make_tooth_wedge(num_teeth, chain_pitch, roller_radius, thickness, tolerances)
    filler = make_root_filler(num_teeth, chain_pitch, thickness)
    seat = make_roller_seat(num_teeth, chain_pitch, roller_radius, thickness, tolerances)

    teeth = tuple(wedge.rotate(i * angle) for i in range(num_teeth))
    fillers = tuple(filler.rotate(i * angle) for i in range(num_teeth))
    envelope = Cylinder(
        trim_radius(num_teeth, chain_pitch, roller_radius), thickness
    ).translate(0, 0, -thickness / 2)

    blank = Intersection((Union(teeth + fillers), envelope))
    seats = tuple(seat.rotate(i * angle) for i in range(num_teeth))
    return Difference(blank, seats)
