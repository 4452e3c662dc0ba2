"""oncostrip public API."""

from oncostrip._version import __version__
from oncostrip.core.layout import build_oncostrip_layout
from oncostrip.core.maf import build_mutation_matrices, read_maf
from oncostrip.core.types import MutationMatrices, OncostripLayout
from oncostrip.plotting.strip import oncostrip, plot_oncostrip_to_file

__all__ = [
    "__version__",
    "MutationMatrices",
    "OncostripLayout",
    "build_mutation_matrices",
    "build_oncostrip_layout",
    "oncostrip",
    "plot_oncostrip_to_file",
    "read_maf",
]
