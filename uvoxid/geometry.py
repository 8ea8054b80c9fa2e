"""
Voxel counting for simple solids. A voxel is a cube with a 1 micrometer edge.
"""

__all__ = [
    'cube_voxels', 'cylinder_voxels', 'sphere_voxels', 'voxel_volume_m3',
    'VOXEL_SIZE_M', 'VOXEL_VOLUME_M3',
]

import math

from uvoxid._const import VOXEL_SIZE_M

VOXEL_VOLUME_M3 = VOXEL_SIZE_M * VOXEL_SIZE_M * VOXEL_SIZE_M


def voxel_volume_m3() -> float:
    """Volume of a single voxel, in cubic meters"""
    return VOXEL_VOLUME_M3


def cube_voxels(side_m: float) -> int:
    """Number of voxels in a cube with the given side length (meters)"""
    return max(int((side_m / VOXEL_SIZE_M) ** 3), 0)


def sphere_voxels(radius_m: float) -> int:
    """Number of voxels in a sphere with the given radius (meters)"""
    volume_m3 = 4 / 3 * math.pi * radius_m ** 3
    return max(int(volume_m3 / VOXEL_VOLUME_M3), 0)


def cylinder_voxels(radius_m: float, height_m: float) -> int:
    """Number of voxels in a cylinder with the given radius and height (meters)"""
    volume_m3 = math.pi * radius_m ** 2 * height_m
    return max(int(volume_m3 / VOXEL_VOLUME_M3), 0)
