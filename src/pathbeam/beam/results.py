"""
Beam result variants.

A beam unit ends in exactly one of two shapes:
    FlatBeam:  paths 'base', 'beam' and, for lines and arcs, 'ray0' / 'ray1'.
    SplitBeam: models 'outside' (the occluder) and 'inside' (the occludee),
               each a FlatBeam.
Both are ordinary Models, so they nest into the output tree unchanged.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import ClassVar, Union

from pathbeam.config import BASE_KEY, BEAM_KEY, OUTSIDE_KEY, INSIDE_KEY, MERGED_SUFFIX
from pathbeam.model.geometry_primitives import Model, Path


class BeamShape(StrEnum):
    FLAT = "flat"
    SPLIT = "split"


@dataclass
class FlatBeam(Model):
    shape: ClassVar[BeamShape] = BeamShape.FLAT

    @property
    def base(self) -> Path:
        return self.paths[BASE_KEY]

    @property
    def beam(self) -> Path:
        return self.paths[BEAM_KEY]

    def merge(self, other: FlatBeam) -> None:
        """Take over the paths of another piece under suffixed keys."""
        for path_id, path in other.paths.items():
            self.paths[path_id + MERGED_SUFFIX] = path


@dataclass
class SplitBeam(Model):
    shape: ClassVar[BeamShape] = BeamShape.SPLIT

    @classmethod
    def from_pair(cls, outside: FlatBeam, inside: FlatBeam) -> SplitBeam:
        return cls(models={OUTSIDE_KEY: outside, INSIDE_KEY: inside})

    @property
    def outside(self) -> FlatBeam:
        return self.models[OUTSIDE_KEY]

    @property
    def inside(self) -> FlatBeam:
        return self.models[INSIDE_KEY]


BeamResult = Union[FlatBeam, SplitBeam]
