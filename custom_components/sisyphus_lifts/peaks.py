"""Peak milestones and progress towards the next one."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class PeakMilestone:
    name: str
    elevation: float  # meters
    state: str = ""


@dataclass(frozen=True, slots=True)
class PeakProgress:
    target: PeakMilestone
    base: PeakMilestone
    progress_percent: float
    remaining_m: int
    peaks_reached: int

    def as_dict(self) -> dict[str, object]:
        return {
            "target": {"name": self.target.name, "elevation": self.target.elevation, "state": self.target.state},
            "base": {"name": self.base.name, "elevation": self.base.elevation, "state": self.base.state},
            "progress_percent": self.progress_percent,
            "remaining_m": self.remaining_m,
            "peaks_reached": self.peaks_reached,
        }


SEA_LEVEL = PeakMilestone("Sea Level", 0)

# "Mode: 50 States". Ordered by elevation.
US_STATE_HIGHPOINTS: tuple[PeakMilestone, ...] = (
    PeakMilestone("Britton Hill", 105, "Florida"),
    PeakMilestone("Ebright Azimuth", 137, "Delaware"),
    PeakMilestone("Driskill Mountain", 163, "Louisiana"),
    PeakMilestone("Woodall Mountain", 246, "Mississippi"),
    PeakMilestone("Jerimoth Hill", 247, "Rhode Island"),
    PeakMilestone("Charles Mound", 376, "Illinois"),
    PeakMilestone("Hoosier Hill", 383, "Indiana"),
    PeakMilestone("Campbell Hill", 472, "Ohio"),
    PeakMilestone("Hawkeye Point", 509, "Iowa"),
    PeakMilestone("Taum Sauk Mountain", 540, "Missouri"),
    PeakMilestone("High Point", 550, "New Jersey"),
    PeakMilestone("Timms Hill", 595, "Wisconsin"),
    PeakMilestone("Mount Arvon", 603, "Michigan"),
    PeakMilestone("Eagle Mountain", 701, "Minnesota"),
    PeakMilestone("Mount Frissell", 725, "Connecticut"),
    PeakMilestone("Cheaha Mountain", 734, "Alabama"),
    PeakMilestone("Mount Magazine", 839, "Arkansas"),
    PeakMilestone("Mount Davis", 979, "Pennsylvania"),
    PeakMilestone("Hoye-Crest", 1024, "Maryland"),
    PeakMilestone("Mount Greylock", 1064, "Massachusetts"),
    PeakMilestone("White Butte", 1069, "North Dakota"),
    PeakMilestone("Sassafras Mountain", 1085, "South Carolina"),
    PeakMilestone("Mount Sunflower", 1232, "Kansas"),
    PeakMilestone("Black Mountain", 1263, "Kentucky"),
    PeakMilestone("Mount Mansfield", 1340, "Vermont"),
    PeakMilestone("Brasstown Bald", 1458, "Georgia"),
    PeakMilestone("Spruce Knob", 1482, "West Virginia"),
    PeakMilestone("Black Mesa", 1516, "Oklahoma"),
    PeakMilestone("Mount Katahdin", 1606, "Maine"),
    PeakMilestone("Mount Marcy", 1629, "New York"),
    PeakMilestone("Panorama Point", 1654, "Nebraska"),
    PeakMilestone("Mount Rogers", 1746, "Virginia"),
    PeakMilestone("Mount Washington", 1917, "New Hampshire"),
    PeakMilestone("Clingmans Dome", 2025, "Tennessee"),
    PeakMilestone("Mount Mitchell", 2037, "North Carolina"),
    PeakMilestone("Black Elk Peak", 2208, "South Dakota"),
    PeakMilestone("Guadalupe Peak", 2667, "Texas"),
    PeakMilestone("Mount Hood", 3429, "Oregon"),
    PeakMilestone("Humphreys Peak", 3852, "Arizona"),
    PeakMilestone("Borah Peak", 3859, "Idaho"),
    PeakMilestone("Granite Peak", 3904, "Montana"),
    PeakMilestone("Boundary Peak", 4007, "Nevada"),
    PeakMilestone("Wheeler Peak", 4013, "New Mexico"),
    PeakMilestone("Kings Peak", 4123, "Utah"),
    PeakMilestone("Mauna Kea", 4207, "Hawaii"),
    PeakMilestone("Gannett Peak", 4209, "Wyoming"),
    PeakMilestone("Mount Rainier", 4392, "Washington"),
    PeakMilestone("Mount Elbert", 4401, "Colorado"),
    PeakMilestone("Mount Whitney", 4421, "California"),
    PeakMilestone("Denali", 6190, "Alaska"),
)


def compute_progress(altitude: float, peaks: Sequence[PeakMilestone] = US_STATE_HIGHPOINTS) -> PeakProgress:
    """Locate ``altitude`` between two milestones.

    The target is the first peak strictly above the altitude, so standing
    exactly on a peak starts the next segment at 0%.
    """
    if not peaks:
        raise ValueError("At least one peak milestone is required")

    reached = sum(1 for p in peaks if p.elevation <= altitude)
    next_index = next((i for i, p in enumerate(peaks) if p.elevation > altitude), None)

    if next_index is None:
        # Every peak surpassed: pin to the last segment at 100%.
        target = peaks[-1]
        base = peaks[-2] if len(peaks) > 1 else SEA_LEVEL
        return PeakProgress(target=target, base=base, progress_percent=100.0, remaining_m=0, peaks_reached=reached)

    target = peaks[next_index]
    base = peaks[next_index - 1] if next_index > 0 else SEA_LEVEL
    span = target.elevation - base.elevation
    raw = (altitude - base.elevation) / span * 100 if span > 0 else 100.0
    return PeakProgress(
        target=target,
        base=base,
        progress_percent=min(max(raw, 0.0), 100.0),
        remaining_m=max(0, round(target.elevation - altitude)),
        peaks_reached=reached,
    )
