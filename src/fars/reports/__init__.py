"""
FARS Reports Package (Imperative Shell)

Orchestrates data loading, plot generation, and file output.
No analysis logic lives here; this package calls the functional core
(src/fars/analysis/) and plotting (src/fars/plotting/) via the data
reader (src/fars/data/reader.py).

Modules:
    generators: fars_map_state() for a single state/year map and the
                ReportGenerator class for batch CSV + HTML output.
"""

from .generators import (
    ReportGenerator,
    build_state_map,
    fars_map_state,
)

__all__ = [
    'ReportGenerator',
    'build_state_map',
    'fars_map_state',
]
