from importlib import metadata

from fcmp.core.compare import Comparison, LineEntry, build_symbol_table, compare_files
from fcmp.logger import with_logging
from fcmp.utils.datastructures import TernarySearchTrie

__all__ = (
    "Comparison",
    "LineEntry",
    "TernarySearchTrie",
    "build_symbol_table",
    "compare_files",
    "with_logging",
)

__version__ = metadata.version("fcmp")
