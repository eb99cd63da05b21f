from .errors import (
    AmbiguousInput,
    HyperbolicError,
    ImpossibleInHyperbolicGeometry,
    InsufficientData,
    InvalidAngles,
    InvalidParameter,
    InvalidRange,
    InvalidSides,
    InvalidTriangle,
    OutOfDomain,
    TooLarge,
    TooManyInputs,
    UninitializedSurface,
)
from .trig import (
    HalfPlaneParameters,
    acosh,
    angle_of_parallelism,
    asinh,
    degrees_to_radians,
    disk_half_plane_convert,
    poincare_gyrovector_convert,
    radians_to_degrees,
    triangle_area,
)
from .triangle import TriangleState, complete_triangle, solve_triangle, validate_triangle_inputs
from .disk import (
    ArcDescriptor,
    DiskFrame,
    DrawConfig,
    LineDescriptor,
    curvature_arc,
    geodesic_between,
    get_draw_config,
    set_draw_config,
)
from .surface import HyperbolicDrawer, RecordingSurface, RenderSurface, render
from .tikz_codegen import TikzSurface, generate_tikz_code, generate_tikz_document

__all__ = [
    'AmbiguousInput',
    'ArcDescriptor',
    'DiskFrame',
    'DrawConfig',
    'HalfPlaneParameters',
    'HyperbolicDrawer',
    'HyperbolicError',
    'ImpossibleInHyperbolicGeometry',
    'InsufficientData',
    'InvalidAngles',
    'InvalidParameter',
    'InvalidRange',
    'InvalidSides',
    'InvalidTriangle',
    'LineDescriptor',
    'OutOfDomain',
    'RecordingSurface',
    'RenderSurface',
    'TikzSurface',
    'TooLarge',
    'TooManyInputs',
    'TriangleState',
    'UninitializedSurface',
    'acosh',
    'angle_of_parallelism',
    'asinh',
    'complete_triangle',
    'curvature_arc',
    'degrees_to_radians',
    'disk_half_plane_convert',
    'generate_tikz_code',
    'generate_tikz_document',
    'geodesic_between',
    'get_draw_config',
    'poincare_gyrovector_convert',
    'radians_to_degrees',
    'render',
    'set_draw_config',
    'solve_triangle',
    'triangle_area',
    'validate_triangle_inputs',
]
