# SPDX-FileCopyrightText: 2017-2025 Contributors to the OpenSTEF project <korte.termijn.prognoses@alliander.com> # noqa E501>
#
# SPDX-License-Identifier: MPL-2.0
"""Specifies the dataclasses describing the spacing of a temporal index."""

import math
from typing import Any, Optional

import pandas as pd
from pydantic import BaseModel, ConfigDict, Field

from tsindex.enums import Scale, Units

NAN = float("nan")


class DifferenceStats(BaseModel):
    """Quantiles of the gaps between consecutive instants, in seconds.

    All fields are NaN when the index has fewer than two instants.
    """

    model_config = ConfigDict(frozen=True)

    minimum: float = Field(NAN, description="Smallest gap.")
    q1: float = Field(NAN, description="First quartile of the gaps.")
    median: float = Field(NAN, description="Median gap.")
    mean: float = Field(NAN, description="Mean gap.")
    q3: float = Field(NAN, description="Third quartile of the gaps.")
    maximum: float = Field(NAN, description="Largest gap.")


class ScaleClassification(BaseModel):
    model_config = ConfigDict(frozen=True)

    scale: Scale = Field(..., description="Periodicity of the typical step.")
    units: Units = Field(..., description="Unit used to report the index.")


class SummaryRecord(BaseModel):
    """Read view summarizing a temporal index.

    Field names use underscores, the external names (``n.obs``,
    ``diff.minimum``, ...) are available through :meth:`to_dict` and
    :meth:`to_frame`.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    n_obs: int = Field(..., description="Number of instants.")
    start: Any = Field(None, description="First instant, in its native class.")
    end: Any = Field(None, description="Last instant, in its native class.")
    units: Units
    scale: Scale
    tzone: Optional[str] = Field(
        None, description="Timezone of a timezone aware datetime index."
    )
    diff_minimum: float = NAN
    diff_q1: float = NAN
    diff_median: float = NAN
    diff_mean: float = NAN
    diff_q3: float = NAN
    diff_maximum: float = NAN

    @property
    def is_regular(self) -> bool:
        """True when every gap between consecutive instants is identical."""
        if math.isnan(self.diff_minimum) or math.isnan(self.diff_maximum):
            return False
        return self.diff_minimum == self.diff_maximum

    def to_dict(self) -> dict[str, Any]:
        """Returns the summary keyed by external field names, in fixed order."""
        return {
            "n.obs": self.n_obs,
            "start": self.start,
            "end": self.end,
            "units": self.units.value,
            "scale": self.scale.value,
            "tzone": self.tzone,
            "diff.minimum": self.diff_minimum,
            "diff.q1": self.diff_q1,
            "diff.median": self.diff_median,
            "diff.mean": self.diff_mean,
            "diff.q3": self.diff_q3,
            "diff.maximum": self.diff_maximum,
        }

    def to_frame(self) -> pd.DataFrame:
        """Returns the summary as a single row dataframe."""
        return pd.DataFrame([self.to_dict()])
