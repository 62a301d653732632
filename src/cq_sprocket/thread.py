"""

Setscrew Thread Cutters

name: thread.py
by:   Gumyr
date: October 19th 2026

desc:

    Unified (UNC) 60° thread cutters used to tap setscrew holes into a
    sprocket hub. A cutter is the shape of the screw itself, enlarged by a
    small clearance, so subtracting it leaves an internal thread.

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
from typing import List, Tuple
from math import tan, radians
import cadquery as cq
from cadquery import Solid
from cq_sprocket.dimensions import MM, INCH

# Radial allowance added to internal thread cutters so a printed hole accepts the screw
INTERNAL_THREAD_CLEARANCE = 0.1 * MM
# Depth, as a fraction of pitch, the tooth root extends inside the core
ROOT_EMBEDMENT = 0.15


class UnifiedThreadCutter(Solid):
    """Unified Thread Cutter

    A right hand 60° thread with its core, starting at the origin and running
    up the Z axis for length. The thread ends are squared off.

    Args:
        major_diameter (float): nominal screw diameter
        threads_per_inch (float): thread density
        length (float): end to end length of the cutter
        internal (bool, optional): enlarge the cutter by INTERNAL_THREAD_CLEARANCE
            so it cuts an internal thread. Defaults to True.

    Attributes:
        pitch (float): length of 360° of thread rotation
        h_parameter (float): height of the fundamental thread triangle
        apex_radius (float): radius of the thread crest
        core_radius (float): radius of the core
        root_radius (float): radius of the base of the thread tooth

    Raises:
        ValueError: if major_diameter, threads_per_inch or length isn't positive
        ValueError: if the thread is too coarse for its diameter
        ValueError: if the result isn't a single valid solid
    """

    @property
    def h_parameter(self) -> float:
        """Height of the fundamental triangle of the thread"""
        return (self.pitch / 2) / tan(radians(self.thread_angle / 2))

    @property
    def min_radius(self) -> float:
        """Radius of the root of the screw"""
        return (self.major_diameter - 2 * (5 / 8) * self.h_parameter) / 2

    def __init__(
        self,
        major_diameter: float,
        threads_per_inch: float,
        length: float,
        internal: bool = True,
    ):
        if min(major_diameter, threads_per_inch, length) <= 0:
            raise ValueError(
                f"Invalid thread {major_diameter}-{threads_per_inch} x {length}"
            )
        self.major_diameter = major_diameter
        self.threads_per_inch = threads_per_inch
        self.length = length
        self.internal = internal
        self.thread_angle = 60
        self.pitch = INCH / threads_per_inch
        if self.min_radius <= 0:
            raise ValueError(
                f"{threads_per_inch} threads per inch is too coarse for a "
                f"{major_diameter} diameter"
            )
        clearance = INTERNAL_THREAD_CLEARANCE if internal else 0.0
        self.apex_radius = major_diameter / 2 + clearance
        self.apex_width = self.pitch / 8
        self.core_radius = self.min_radius + clearance
        # The tooth continues below the core surface along its flanks so the
        # helical root never lies close to the core cylinder when they're fused
        flank_slope = 2 * tan(radians(self.thread_angle / 2))
        self.root_radius = self.core_radius - ROOT_EMBEDMENT * self.pitch
        self.root_width = 3 * self.pitch / 4 + flank_slope * ROOT_EMBEDMENT * self.pitch

        cq_object = self.make_cutter()
        solids = cq_object.Solids()
        if len(solids) != 1 or not solids[0].isValid():
            raise ValueError(
                f"Unable to create a valid {major_diameter}-{threads_per_inch} x "
                f"{length} thread cutter"
            )
        super().__init__(solids[0].wrapped)

    def make_thread_faces(self, length: float) -> Tuple[List[cq.Face], List[cq.Face]]:
        """Create the helical faces and the two end caps of the thread tooth

        Four ruled surfaces are made between the apex and root helices, the
        ends are closed with planar quadrilaterals.
        """
        apex_helix_wires = [
            cq.Wire.makeHelix(
                pitch=self.pitch, height=length, radius=self.apex_radius
            ).translate((0, 0, i * self.apex_width))
            for i in [-0.5, 0.5]
        ]
        root_helix_wires = [
            cq.Wire.makeHelix(
                pitch=self.pitch, height=length, radius=self.root_radius
            ).translate((0, 0, i * self.root_width))
            for i in [-0.5, 0.5]
        ]
        end_cap_wires = [
            cq.Wire.makePolygon(
                [
                    apex_helix_wires[0].positionAt(i),
                    apex_helix_wires[1].positionAt(i),
                    root_helix_wires[1].positionAt(i),
                    root_helix_wires[0].positionAt(i),
                    apex_helix_wires[0].positionAt(i),
                ]
            )
            for i in [0, 1]
        ]
        thread_faces = [
            cq.Face.makeRuledSurface(apex_helix_wires[0], apex_helix_wires[1]),
            cq.Face.makeRuledSurface(apex_helix_wires[1], root_helix_wires[1]),
            cq.Face.makeRuledSurface(root_helix_wires[1], root_helix_wires[0]),
            cq.Face.makeRuledSurface(root_helix_wires[0], apex_helix_wires[0]),
        ]
        end_faces = [cq.Face.makeFromWires(w) for w in end_cap_wires]
        return (thread_faces, end_faces)

    def make_thread_solid(self, length: float) -> Solid:
        """Create the thread tooth solid, outward facing regardless of face order"""
        (thread_faces, end_faces) = self.make_thread_faces(length)
        thread_shell = cq.Shell.makeShell(thread_faces + end_faces).fix()
        thread_solid = cq.Solid.makeSolid(thread_shell).fix()
        if thread_solid.Volume() < 0:
            thread_solid = Solid(thread_solid.wrapped.Reversed())
        return thread_solid

    def square_off_ends(self, cq_object: Solid) -> Solid:
        """Clip the thread at z=0 and z=length"""
        half_box_size = 2 * self.apex_radius
        box_size = 2 * half_box_size
        cutter = cq.Solid.makeBox(
            length=box_size,
            width=box_size,
            height=self.length,
            pnt=cq.Vector(-half_box_size, -half_box_size, -self.length),
        )
        squared = cq_object
        for i in range(2):
            squared = squared.cut(cutter.translate(cq.Vector(0, 0, 2 * i * self.length)))
        return squared

    def make_cutter(self) -> cq.Shape:
        """Fuse the thread to its core and square off both ends"""
        # Start a pitch early and finish a pitch late so clipping leaves full threads
        extended_length = self.length + 2 * self.pitch
        thread = self.make_thread_solid(extended_length).translate((0, 0, -self.pitch))
        core = cq.Solid.makeCylinder(self.core_radius, extended_length).translate(
            (0, 0, -self.pitch)
        )
        return self.square_off_ends(thread.fuse(core).clean())


def generate_internal_thread(
    major_diameter: float, threads_per_inch: float, length: float
) -> Solid:
    """
    Create a cutter for a tapped hole

    Args:
        major_diameter (float): nominal screw diameter in mm
        threads_per_inch (float): thread density
        length (float): depth of the hole in mm

    Returns:
        Solid: cutter along +Z starting at the origin
    """
    cutter = UnifiedThreadCutter(major_diameter, threads_per_inch, length, internal=True)
    return Solid(cutter.wrapped)


def tap_drill_diameter(major_diameter: float, threads_per_inch: float) -> float:
    """Drill size for tapping a thread after printing: major diameter less one pitch"""
    return major_diameter - INCH / threads_per_inch


def generate_plain_hole(
    major_diameter: float, threads_per_inch: float, length: float
) -> Solid:
    """
    Create a cutter for an unthreaded hole sized to be tapped after fabrication

    Takes the same arguments as generate_internal_thread so either can be used
    to cut setscrew holes.
    """
    return Solid.makeCylinder(
        tap_drill_diameter(major_diameter, threads_per_inch) / 2, length
    )
