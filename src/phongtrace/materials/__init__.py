"""Materials module for surface shading.

Components:
    material: Phong material parameters and the lighting function

Each material provides:
    - lighting(): Evaluate ambient + diffuse + specular for one light
"""

from .material import Material

__all__ = [
    "Material",
]
