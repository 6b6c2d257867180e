from .writers import (
    DEFAULT_EDGE_TRIM,
    SnapshotPaths,
    pad_trial_index,
    read_power_image,
    snapshot_stem,
    write_power_image,
    write_radial_profile,
    write_snapshot,
)

__all__ = [
    "DEFAULT_EDGE_TRIM",
    "SnapshotPaths",
    "pad_trial_index",
    "read_power_image",
    "snapshot_stem",
    "write_power_image",
    "write_radial_profile",
    "write_snapshot",
]
