from pytest import approx

from uvoxid.geometry import (
    VOXEL_SIZE_M, cube_voxels, cylinder_voxels, sphere_voxels, voxel_volume_m3
)


def test_voxel_volume():
    assert VOXEL_SIZE_M == 1e-6
    assert abs(voxel_volume_m3() - 1e-18) < 1e-24


def test_cube_voxels():
    voxels = cube_voxels(1e-3)  # 1 mm
    assert isinstance(voxels, int)
    assert voxels == approx(1e9, rel=1e-9)


def test_sphere_voxels():
    voxels = sphere_voxels(1e-3)
    assert isinstance(voxels, int)
    assert voxels == approx(4 / 3 * 3.141592653589793 * 1e9, rel=1e-9)


def test_cylinder_voxels():
    voxels = cylinder_voxels(1e-3, 1e-3)
    assert isinstance(voxels, int)
    assert voxels == approx(3.141592653589793 * 1e9, rel=1e-9)

    assert cylinder_voxels(1e-3, 0.) == 0


def test_negative_dimensions():
    # Negative volumes saturate at zero voxels
    assert cube_voxels(-1e-3) == 0
    assert sphere_voxels(-1e-3) == 0
    assert cylinder_voxels(1e-3, -1e-3) == 0
    assert cylinder_voxels(-1e-3, 1e-3) > 0
