"""

Constructive Solid Geometry Expression Trees

name: csg.py
by:   Gumyr
date: October 19th 2026

desc:

    A small, immutable expression tree of primitives, transforms and boolean
    operations. Sprocket features are described as trees which can be
    inspected (and compared) before a single evaluation into a cadquery Solid.

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
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, Iterator, Optional, Tuple, Type
from cadquery import Vector, Solid, Shape

logger = logging.getLogger("cq_sprocket")

ThreadMaker = Callable[[float, float, float], Shape]


class Node(ABC):
    """Base class of all CSG tree nodes"""

    @property
    def children(self) -> Tuple["Node", ...]:
        """The operands of this node"""
        return ()

    @abstractmethod
    def to_solid(self, thread_maker: Optional[ThreadMaker] = None) -> Shape:
        """Build a new cadquery shape from this node"""

    def walk(self) -> Iterator["Node"]:
        """Iterate over this node and all of its descendants, depth first"""
        yield self
        for child in self.children:
            yield from child.walk()

    def count(self, node_type: Type["Node"]) -> int:
        """The number of nodes of the given type in this tree"""
        return sum(1 for node in self.walk() if isinstance(node, node_type))

    def translate(self, x: float = 0.0, y: float = 0.0, z: float = 0.0) -> "Translate":
        """Return this node moved by the given offset"""
        return Translate(self, (x, y, z))

    def rotate(
        self, angle: float, axis: Tuple[float, float, float] = (0, 0, 1)
    ) -> "Rotate":
        """Return this node rotated about an axis through the origin"""
        return Rotate(self, angle, axis)

    def __or__(self, other: "Node") -> "Union":
        return Union((self, other))

    def __sub__(self, other: "Node") -> "Difference":
        return Difference(self, (other,))

    def __and__(self, other: "Node") -> "Intersection":
        return Intersection((self, other))


#
#  =============================== PRIMITIVES ===============================
#
@dataclass(frozen=True)
class Cylinder(Node):
    """Cylinder along +Z with the center of its base at the origin"""

    radius: float
    height: float

    def __post_init__(self):
        if self.radius <= 0 or self.height <= 0:
            raise ValueError(
                f"Cylinder radius {self.radius} and height {self.height} must be positive"
            )

    def to_solid(self, thread_maker: Optional[ThreadMaker] = None) -> Shape:
        return Solid.makeCylinder(self.radius, self.height)


@dataclass(frozen=True)
class Box(Node):
    """Rectangular prism with one corner at the origin extending in +X, +Y, +Z"""

    length: float
    width: float
    height: float

    def __post_init__(self):
        if min(self.length, self.width, self.height) <= 0:
            raise ValueError(
                f"Box dimensions {self.length}x{self.width}x{self.height} must be positive"
            )

    def to_solid(self, thread_maker: Optional[ThreadMaker] = None) -> Shape:
        return Solid.makeBox(self.length, self.width, self.height)


@dataclass(frozen=True)
class Thread(Node):
    """Internal thread cutter along +Z starting at the origin

    The thread geometry is delegated to the ``thread_maker`` given at evaluation.
    """

    major_diameter: float
    threads_per_inch: float
    length: float

    def __post_init__(self):
        if min(self.major_diameter, self.threads_per_inch, self.length) <= 0:
            raise ValueError(
                f"Thread {self.major_diameter}-{self.threads_per_inch} x {self.length} "
                "must have positive dimensions"
            )

    def to_solid(self, thread_maker: Optional[ThreadMaker] = None) -> Shape:
        if thread_maker is None:
            raise ValueError("A thread_maker is required to evaluate a Thread node")
        shape = thread_maker(self.major_diameter, self.threads_per_inch, self.length)
        if len(shape.Solids()) != 1 or not shape.isValid():
            raise ValueError(
                f"thread_maker returned {len(shape.Solids())} solids for a "
                f"{self.major_diameter}-{self.threads_per_inch} x {self.length} thread, "
                "expected one valid solid"
            )
        return shape


#
#  =============================== TRANSFORMS ===============================
#
@dataclass(frozen=True)
class Translate(Node):
    """Move the child by offset"""

    child: Node
    offset: Tuple[float, float, float]

    @property
    def children(self) -> Tuple[Node, ...]:
        return (self.child,)

    def to_solid(self, thread_maker: Optional[ThreadMaker] = None) -> Shape:
        return self.child.to_solid(thread_maker).translate(Vector(*self.offset))


@dataclass(frozen=True)
class Rotate(Node):
    """Rotate the child by angle degrees about an axis through the origin"""

    child: Node
    angle: float
    axis: Tuple[float, float, float] = (0, 0, 1)

    @property
    def children(self) -> Tuple[Node, ...]:
        return (self.child,)

    def to_solid(self, thread_maker: Optional[ThreadMaker] = None) -> Shape:
        return self.child.to_solid(thread_maker).rotate(
            Vector(0, 0, 0), Vector(*self.axis), self.angle
        )


#
#  =============================== BOOLEAN OPERATIONS ===============================
#
@dataclass(frozen=True)
class Union(Node):
    """Fuse all of the operands"""

    operands: Tuple[Node, ...]

    def __post_init__(self):
        if not self.operands:
            raise ValueError("Union requires at least one operand")

    @property
    def children(self) -> Tuple[Node, ...]:
        return self.operands

    def to_solid(self, thread_maker: Optional[ThreadMaker] = None) -> Shape:
        solids = [operand.to_solid(thread_maker) for operand in self.operands]
        if len(solids) == 1:
            return solids[0]
        return solids[0].fuse(*solids[1:])


@dataclass(frozen=True)
class Difference(Node):
    """Remove all of the cutters from the base"""

    base: Node
    cutters: Tuple[Node, ...]

    @property
    def children(self) -> Tuple[Node, ...]:
        return (self.base,) + self.cutters

    def to_solid(self, thread_maker: Optional[ThreadMaker] = None) -> Shape:
        base = self.base.to_solid(thread_maker)
        if not self.cutters:
            return base
        return base.cut(*[cutter.to_solid(thread_maker) for cutter in self.cutters])


@dataclass(frozen=True)
class Intersection(Node):
    """Keep only the volume common to all of the operands"""

    operands: Tuple[Node, ...]

    def __post_init__(self):
        if not self.operands:
            raise ValueError("Intersection requires at least one operand")

    @property
    def children(self) -> Tuple[Node, ...]:
        return self.operands

    def to_solid(self, thread_maker: Optional[ThreadMaker] = None) -> Shape:
        result = self.operands[0].to_solid(thread_maker)
        for operand in self.operands[1:]:
            result = result.intersect(operand.to_solid(thread_maker))
        return result


def union(*nodes: Optional[Node]) -> Optional[Node]:
    """Union of the given nodes ignoring missing (None) ones

    Returns None if there is nothing to combine and the node itself if only
    one is given.
    """
    present = tuple(node for node in nodes if node is not None)
    if not present:
        return None
    if len(present) == 1:
        return present[0]
    return Union(present)


def evaluate(node: Node, thread_maker: Optional[ThreadMaker] = None) -> Shape:
    """
    Evaluate a CSG tree into a cadquery shape

    Args:
        node (Node): root of the tree
        thread_maker (ThreadMaker, optional): builds Thread leaves, called with
            (major_diameter, threads_per_inch, length). Defaults to None.

    Returns:
        Shape: a Solid, or a Compound if the result isn't a single solid
    """
    logger.debug(
        "evaluating CSG tree of %d nodes (%d threads)",
        sum(1 for _ in node.walk()),
        node.count(Thread),
    )
    result = node.to_solid(thread_maker)
    # Unwrap the Compound that OCCT booleans generate around a single solid
    solids = result.Solids()
    if len(solids) == 1:
        return solids[0]
    return result
