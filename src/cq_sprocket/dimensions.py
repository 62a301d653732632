"""

Roller Chain and Shaft Feature Dimensions

name: dimensions.py
by:   Gumyr
date: October 19th 2026

desc:

    Standard roller chain dimensions (ANSI, bicycle and motorcycle) and the
    empirical keyway and setscrew sizing tables used to size the features of
    a sprocket hub. All table values are in inches.

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
from typing import Optional, Tuple

MM = 1
INCH = 25.4 * MM


def inch_to_mm(length: float) -> float:
    """Convert a length in inches to millimetres"""
    return length * INCH


def mm_to_inch(length: float) -> float:
    """Convert a length in millimetres to inches"""
    return length / INCH


@dataclass(frozen=True)
class ChainSizeSpec:
    """Physical constants of a standard roller chain

    Args:
        pitch (float): distance between the centers of two adjacent rollers
        roller_diameter (float): size of the cylindrical rollers
        thickness (float): thickness of a sprocket that fits between the inner plates
        plate_half_width (float): half the height of a link plate, 0 if not tabulated
        known (bool): False for a size that isn't in the tables

    All values are in inches.
    """

    pitch: float
    roller_diameter: float
    thickness: float
    plate_half_width: float = 0.0
    known: bool = True


UNKNOWN_CHAIN_SIZE = ChainSizeSpec(0.0, 0.0, 0.0, 0.0, known=False)

# chain size: (pitch, roller diameter, sprocket thickness)
CHAIN_DIMENSIONS = {
    # ANSI
    25: (0.250, 0.130, 0.110),
    35: (0.375, 0.200, 0.168),
    40: (0.500, 0.312, 0.284),
    41: (0.500, 0.306, 0.227),
    50: (0.625, 0.400, 0.343),
    60: (0.750, 0.469, 0.459),
    80: (1.000, 0.625, 0.575),
    # Bicycle - 1/2" x 1/8" single speed and 1/2" x 3/32" derailleur
    1: (0.500, 0.3125, 0.110),
    2: (0.500, 0.3125, 0.084),
    # Motorcycle
    420: (0.500, 0.306, 0.227),
    425: (0.500, 0.306, 0.284),
    428: (0.500, 0.335, 0.284),
    520: (0.625, 0.400, 0.227),
    525: (0.625, 0.400, 0.284),
    530: (0.625, 0.400, 0.343),
    630: (0.750, 0.469, 0.343),
}

# Link plate height, only tabulated for ANSI chain
CHAIN_PLATE_WIDTHS = {
    25: 0.237,
    35: 0.356,
    40: 0.472,
    41: 0.383,
    50: 0.591,
    60: 0.713,
    80: 0.949,
}

CHAIN_SIZES = tuple(CHAIN_DIMENSIONS.keys())

# (largest bore, square key width) - ANSI B17.1
KEYWAY_WIDTHS = (
    (0.375, 0.0),
    (0.5625, 0.125),
    (0.875, 0.1875),
    (1.25, 0.25),
    (1.375, 0.3125),
    (1.75, 0.375),
    (2.25, 0.5),
    (2.75, 0.625),
    (3.25, 0.75),
    (3.75, 0.875),
    (4.5, 1.0),
    (5.5, 1.25),
    (6.5, 1.5),
    (7.5, 1.75),
    (9.0, 2.0),
    (10.9375, 2.5),
)

# (largest bore, setscrew diameter) - #10 through 5/8"
SETSCREW_WIDTHS = (
    (0.375, 0.0),
    (0.625, 0.19),
    (0.875, 0.25),
    (1.25, 0.3125),
    (1.75, 0.375),
    (2.25, 0.5),
    (3.25, 0.625),
)

# (largest setscrew diameter, UNC threads per inch)
SETSCREW_THREADS = (
    (0.19, 24),
    (0.25, 20),
    (0.3125, 18),
    (0.375, 16),
    (0.5, 13),
    (0.625, 11),
)


def _step_lookup(table: Tuple[Tuple[float, float], ...], value: float) -> Optional[float]:
    """Return the entry of the first breakpoint not exceeded by value, None past the end"""
    for limit, result in table:
        if value <= limit:
            return result
    return None


def lookup_chain_size(size: int) -> ChainSizeSpec:
    """
    Find the dimensions of a standard roller chain

    Args:
        size (int): chain size code, e.g. 25, 40, 420 or 1 for a bicycle chain

    Returns:
        ChainSizeSpec: chain dimensions or UNKNOWN_CHAIN_SIZE if the size isn't tabulated

    Example:

        .. doctest::

            >>> lookup_chain_size(25).pitch
            0.25
            >>> lookup_chain_size(99).known
            False

    """
    try:
        pitch, roller_diameter, thickness = CHAIN_DIMENSIONS[size]
    except (KeyError, TypeError):
        return UNKNOWN_CHAIN_SIZE
    return ChainSizeSpec(
        pitch=pitch,
        roller_diameter=roller_diameter,
        thickness=thickness,
        plate_half_width=get_chain_plate_width(size) / 2,
    )


def get_pitch(size: int) -> float:
    """Chain pitch of the given size, 0 if unknown"""
    return lookup_chain_size(size).pitch


def get_roller_diameter(size: int) -> float:
    """Roller diameter of the given size, 0 if unknown"""
    return lookup_chain_size(size).roller_diameter


def get_thickness(size: int) -> float:
    """Sprocket plate thickness for the given size, 0 if unknown"""
    return lookup_chain_size(size).thickness


def get_chain_plate_width(size: int) -> float:
    """Link plate height of an ANSI chain, 0 for other or unknown sizes"""
    try:
        return CHAIN_PLATE_WIDTHS.get(size, 0.0)
    except TypeError:
        return 0.0


def get_keyway_width(bore: float) -> float:
    """Square key width for a bore, 0 for small bores or bores beyond the table"""
    width = _step_lookup(KEYWAY_WIDTHS, bore)
    return 0.0 if width is None else width


def get_setscrew_width(bore: float) -> float:
    """Setscrew diameter for a bore, 0 for small bores or bores beyond the table"""
    width = _step_lookup(SETSCREW_WIDTHS, bore)
    return 0.0 if width is None else width


def get_setscrew_threads(setscrew_width: float) -> int:
    """UNC threads per inch of a setscrew, 0 if the setscrew is beyond the table"""
    threads = _step_lookup(SETSCREW_THREADS, setscrew_width)
    return 0 if threads is None else threads


@dataclass(frozen=True)
class BoreFeatureSizes:
    """Keyway and setscrew sizes for a bore in inches

    The ``*_known`` flags are False when the bore is too large for the
    table, which separates a table miss from a bore too small for the feature.
    """

    keyway_width: float
    setscrew_width: float
    setscrew_threads_per_inch: int
    keyway_known: bool = True
    setscrew_known: bool = True


def lookup_bore_features(bore: float) -> BoreFeatureSizes:
    """
    Size the keyway and setscrew for a shaft bore

    Args:
        bore (float): bore diameter in inches

    Returns:
        BoreFeatureSizes: keyway width, setscrew width and threads per inch
    """
    keyway_width = _step_lookup(KEYWAY_WIDTHS, bore)
    setscrew_width = _step_lookup(SETSCREW_WIDTHS, bore)
    setscrew_width_value = 0.0 if setscrew_width is None else setscrew_width
    return BoreFeatureSizes(
        keyway_width=0.0 if keyway_width is None else keyway_width,
        setscrew_width=setscrew_width_value,
        setscrew_threads_per_inch=(
            get_setscrew_threads(setscrew_width_value)
            if setscrew_width_value > 0
            else 0
        ),
        keyway_known=keyway_width is not None,
        setscrew_known=setscrew_width is not None,
    )
