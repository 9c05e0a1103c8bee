"""
Beam Options
============
The configuration record of a beam computation.
"""
from __future__ import annotations

from dataclasses import dataclass, asdict, fields
import logging
import math
from typing import Any, Dict, Mapping, Union

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BeamOptions:
    distance: float  # length of the beam displacement, in model units
    angle: float     # direction of the displacement, degrees CCW from +X
    scale: float     # shrink factor of the projected copy about the model center

    def validate(self) -> None:
        """Reject options that would produce meaningless geometry."""
        for f in fields(self):
            value = getattr(self, f.name)
            if not math.isfinite(value):
                raise ValueError(f"Beam option '{f.name}' must be a finite number, got {value!r}.")
        if self.scale == 0.0:
            raise ValueError("Beam option 'scale' must not be zero.")
        if self.distance < 0.0:
            raise ValueError(f"Beam option 'distance' must not be negative, got {self.distance}.")

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @staticmethod
    def from_dict(data: Mapping[str, Any]) -> BeamOptions:
        missing = [f.name for f in fields(BeamOptions) if f.name not in data]
        if missing:
            raise ValueError(f"Missing beam option(s): {', '.join(missing)}")
        try:
            return BeamOptions(
                distance=float(data["distance"]),
                angle=float(data["angle"]),
                scale=float(data["scale"])
            )
        except (TypeError, ValueError) as e:
            raise ValueError(f"Invalid beam options {dict(data)!r}: {e}") from e

    @staticmethod
    def coerce(options: Union[BeamOptions, Mapping[str, Any]]) -> BeamOptions:
        """Accept either a BeamOptions instance or a plain mapping, and validate it."""
        if not isinstance(options, BeamOptions):
            options = BeamOptions.from_dict(options)
        options.validate()
        logger.debug(f"Beam options: {options}")
        return options
