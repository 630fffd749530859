# tracelab/__init__.py

# Errors
from .errors import (
    TracingError,
    InvalidDimensions,
    InvalidCellValue,
    TraceCancelled,
)

# Core: grid, tables, scan + trace
from .compass import Crossing, Polarity, LEVEL_SHIFT, level_shift
from .grid import PaddedGrid
from .tracer import BoundaryTracer
from .scan import ScanCursor, TraceContext, trace_bits
from .contours import Contour, ContourCollector, signed_area, contains_point

# Serialization
from .svg import path_d, paths_d, write_svg

# Images & I/O
from .binarise import binarise, foreground_mask
from .io_save_load import load_gray, save_json

# Entry points
from .pipeline import (
    TraceOptions,
    bits_to_paths,
    image_to_paths,
    process_images,
)

__version__ = "0.1.0"
