"""
Configuration & Constants
=========================
This module serves as the central registry for numeric tolerances and the
fixed keys of the generated beam models.

Why is this file needed?
------------------------
1. Consistency: every geometric comparison in the package uses the same
   tolerances, so a point found "on" an arc by one routine is also found
   there by another.
2. Layout: the output model uses literal keys ('base', 'beam', 'ray0', ...)
   that callers rely on when rendering; they are defined once here.

Exports:
    ROUNDING_ACCURACY (float): Absolute tolerance for coordinates and angles.
    TANGENT_TOLERANCE (float): Relative tolerance for tangential contacts.
    BASE_KEY, BEAM_KEY, RAY_KEY_PREFIX (str): Path keys of a flat beam.
    OUTSIDE_KEY, INSIDE_KEY (str): Model keys of a split beam.
    MERGED_SUFFIX (str): Suffix for paths merged from a wrap-around piece.
"""

# Tolerances
ROUNDING_ACCURACY: float = 1e-7
TANGENT_TOLERANCE: float = 1e-9

# Flat beam path keys
BASE_KEY: str = "base"
BEAM_KEY: str = "beam"
RAY_KEY_PREFIX: str = "ray"

# Split beam model keys
OUTSIDE_KEY: str = "outside"
INSIDE_KEY: str = "inside"

MERGED_SUFFIX: str = "_2"


def ray_key(index: int) -> str:
    """Key of the n-th connecting ray ('ray0', 'ray1')."""
    return f"{RAY_KEY_PREFIX}{index}"
