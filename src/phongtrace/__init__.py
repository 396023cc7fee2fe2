"""Phong ray tracing kernel.

This package turns a scene of spheres lit by a point light into per-pixel
colors written to a raster image, with support for:
- Homogeneous point/vector algebra and 4x4 affine transforms
- Cofactor-based determinant and matrix inversion
- Ray-sphere intersection in transformed object space
- Phong local illumination (ambient, diffuse, specular)
- Taichi-backed raster canvas with PPM and PNG export

Subpackages:
    core: Tuples, colors, matrices, transforms, rays, canvas and render driver
    geometry: Sphere primitive and intersection sets
    materials: Phong material and lighting model
    scene: Point light and world container
    camera: Wall-projection camera for primary rays
    preview: Image export utilities
"""

__version__ = "0.1.0"
