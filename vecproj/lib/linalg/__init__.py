from .projection import (
    DegenerateBasisError,
    decompose,
    project,
    project_unit,
    reject,
    scalar_component,
)
from .vector import (
    SCALAR,
    Vector,
    Vector2D,
    Vector3D,
    Vector4D,
    ZeroVectorError,
    dot,
    vector_type,
)

__all__ = [
    "DegenerateBasisError",
    "SCALAR",
    "Vector",
    "Vector2D",
    "Vector3D",
    "Vector4D",
    "ZeroVectorError",
    "decompose",
    "dot",
    "project",
    "project_unit",
    "reject",
    "scalar_component",
    "vector_type",
]
