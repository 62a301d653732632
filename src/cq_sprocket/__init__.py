"""Parametric roller chain sprockets with hubs, keyways and setscrews"""
import logging

__version__ = "0.1.0"

logging.getLogger("cq_sprocket").addHandler(logging.NullHandler())

from cq_sprocket.dimensions import (
    MM,
    INCH,
    CHAIN_SIZES,
    UNKNOWN_CHAIN_SIZE,
    ChainSizeSpec,
    BoreFeatureSizes,
    inch_to_mm,
    mm_to_inch,
    lookup_chain_size,
    lookup_bore_features,
    get_keyway_width,
    get_setscrew_width,
    get_setscrew_threads,
)
from cq_sprocket.tolerances import (
    MIN_CHAIN_CLEARANCE,
    MIN_SETSCREW_THREADS,
    PrintTolerances,
    ClearanceLimits,
)
from cq_sprocket.parameters import SprocketConfig, DerivedGeometry
from cq_sprocket.clearance import ClearanceWarning, WarningKind, validate
from cq_sprocket.sprocket import Sprocket, build_sprocket_tree, generate_sprocket
from cq_sprocket.thread import generate_internal_thread, generate_plain_hole
