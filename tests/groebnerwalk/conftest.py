import pytest
from sympy import QQ

from groebnerwalk import Ideal, polynomial_ring


@pytest.fixture
def ring_xy():
    R, x, y = polynomial_ring("x,y", QQ, "degrevlex")
    return R, x, y


@pytest.fixture
def scenario(ring_xy):
    # {y^2 - x, x^2 - y} is already a reduced degrevlex basis (coprime leads)
    R, x, y = ring_xy
    return Ideal(R, [y**2 - x, x**2 - y], is_gb=True)


@pytest.fixture
def ring_xyz():
    R, x, y, z = polynomial_ring("x,y,z", QQ, "degrevlex")
    return R, x, y, z


@pytest.fixture
def cyclic_like(ring_xyz):
    R, x, y, z = ring_xyz
    return Ideal(R, [x**2 + y - z, y**2 + z - x, z**2 + x - y])


@pytest.fixture
def shared_first_row(ring_xyz):
    # degrevlex and deglex both start with the all-ones row but differ on this ideal
    R, x, y, z = ring_xyz
    return Ideal(R, [x**3 - y * z, y**2 - x * z, z**2 - x**2 * y])
