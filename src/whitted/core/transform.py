# core/transform.py
import math
from typing import Optional

import numpy as np

from whitted.core.errors import InvalidViewConfiguration, SingularTransform
from whitted.core.utils import EPSILON
from whitted.core.vector import Vector3

# Determinants below this are treated as singular.
SINGULAR_DETERMINANT = 1e-12


class Transform:
    """
    An immutable 4x4 affine transform with its inverse cached alongside.

    The matrix and its inverse are only ever set together, so a shape or
    camera holding a Transform can never see a stale inverse. Composition
    follows matrix order: ``a @ b`` applies ``b`` first.
    """
    def __init__(self, matrix: Optional[np.ndarray] = None):
        m = np.identity(4) if matrix is None else np.array(matrix, dtype=np.float64)
        if m.shape != (4, 4):
            raise ValueError(f"transform matrix must be 4x4, got {m.shape}")
        if not np.all(np.isfinite(m)):
            raise SingularTransform("transform matrix has non-finite entries")
        if abs(np.linalg.det(m)) < SINGULAR_DETERMINANT:
            raise SingularTransform(f"transform matrix is not invertible:\n{m}")
        try:
            inverse = np.linalg.inv(m)
        except np.linalg.LinAlgError as e:
            raise SingularTransform(str(e)) from e
        self._set(m, inverse)

    @classmethod
    def _from_pair(cls, matrix: np.ndarray, inverse: np.ndarray) -> "Transform":
        t = cls.__new__(cls)
        t._set(matrix, inverse)
        return t

    def _set(self, matrix: np.ndarray, inverse: np.ndarray):
        matrix.flags.writeable = False
        inverse.flags.writeable = False
        self.matrix = matrix
        self.inverse_matrix = inverse
        # Plain float rows for the per-ray hot path; numpy is slow on 3-vectors.
        self._rows = matrix[:3].tolist()
        self._normal_rows = inverse[:3, :3].T.tolist()
        self._inverse = None

    # ------------------------------------------------------------------
    # Factories
    # ------------------------------------------------------------------
    @classmethod
    def identity(cls) -> "Transform":
        return cls._from_pair(np.identity(4), np.identity(4))

    @classmethod
    def translation(cls, x: float, y: float, z: float) -> "Transform":
        m = np.identity(4)
        m[:3, 3] = (x, y, z)
        inv = np.identity(4)
        inv[:3, 3] = (-x, -y, -z)
        return cls._from_pair(m, inv)

    @classmethod
    def scaling(cls, x: float, y: float, z: float) -> "Transform":
        if x == 0 or y == 0 or z == 0:
            raise SingularTransform(f"cannot scale by zero: ({x}, {y}, {z})")
        m = np.diag([x, y, z, 1.0]).astype(np.float64)
        inv = np.diag([1.0 / x, 1.0 / y, 1.0 / z, 1.0])
        return cls._from_pair(m, inv)

    @classmethod
    def rotation_x(cls, radians: float) -> "Transform":
        c, s = math.cos(radians), math.sin(radians)
        m = np.array([[1, 0, 0, 0],
                      [0, c, -s, 0],
                      [0, s, c, 0],
                      [0, 0, 0, 1]], dtype=np.float64)
        return cls._from_pair(m, m.T.copy())

    @classmethod
    def rotation_y(cls, radians: float) -> "Transform":
        c, s = math.cos(radians), math.sin(radians)
        m = np.array([[c, 0, s, 0],
                      [0, 1, 0, 0],
                      [-s, 0, c, 0],
                      [0, 0, 0, 1]], dtype=np.float64)
        return cls._from_pair(m, m.T.copy())

    @classmethod
    def rotation_z(cls, radians: float) -> "Transform":
        c, s = math.cos(radians), math.sin(radians)
        m = np.array([[c, -s, 0, 0],
                      [s, c, 0, 0],
                      [0, 0, 1, 0],
                      [0, 0, 0, 1]], dtype=np.float64)
        return cls._from_pair(m, m.T.copy())

    @classmethod
    def shearing(cls, xy: float, xz: float, yx: float, yz: float,
                 zx: float, zy: float) -> "Transform":
        return cls(np.array([[1, xy, xz, 0],
                             [yx, 1, yz, 0],
                             [zx, zy, 1, 0],
                             [0, 0, 0, 1]], dtype=np.float64))

    @classmethod
    def view_transform(cls, eye: Vector3, to: Vector3, up: Vector3) -> "Transform":
        """
        Orients the world relative to an eye at `eye` looking at `to`.
        """
        look = to - eye
        if look.length() < EPSILON:
            raise InvalidViewConfiguration("view transform eye and target coincide")
        if up.length() < EPSILON:
            raise InvalidViewConfiguration("view transform up vector is zero")
        forward = look.normalize()
        left = forward.cross(up.normalize())
        if left.length() < EPSILON:
            raise InvalidViewConfiguration(
                f"up vector {up!r} is parallel to the view direction {forward!r}")
        left = left.normalize()
        true_up = left.cross(forward)
        orientation = np.array([[left.x, left.y, left.z, 0],
                                [true_up.x, true_up.y, true_up.z, 0],
                                [-forward.x, -forward.y, -forward.z, 0],
                                [0, 0, 0, 1]], dtype=np.float64)
        # Orthonormal rotation: its inverse is its transpose.
        rotation = cls._from_pair(orientation, orientation.T.copy())
        return rotation @ cls.translation(-eye.x, -eye.y, -eye.z)

    # ------------------------------------------------------------------
    # Algebra
    # ------------------------------------------------------------------
    @property
    def inverse(self) -> "Transform":
        if self._inverse is None:
            self._inverse = Transform._from_pair(self.inverse_matrix, self.matrix)
        return self._inverse

    def __matmul__(self, other: "Transform") -> "Transform":
        return Transform._from_pair(self.matrix @ other.matrix,
                                    other.inverse_matrix @ self.inverse_matrix)

    def is_identity(self) -> bool:
        return bool(np.allclose(self.matrix, np.identity(4)))

    def apply_point(self, p: Vector3) -> Vector3:
        r0, r1, r2 = self._rows
        x, y, z = p.x, p.y, p.z
        return Vector3(r0[0] * x + r0[1] * y + r0[2] * z + r0[3],
                       r1[0] * x + r1[1] * y + r1[2] * z + r1[3],
                       r2[0] * x + r2[1] * y + r2[2] * z + r2[3])

    def apply_vector(self, v: Vector3) -> Vector3:
        r0, r1, r2 = self._rows
        x, y, z = v.x, v.y, v.z
        return Vector3(r0[0] * x + r0[1] * y + r0[2] * z,
                       r1[0] * x + r1[1] * y + r1[2] * z,
                       r2[0] * x + r2[1] * y + r2[2] * z)

    def apply_normal(self, n: Vector3) -> Vector3:
        """
        Maps an object-space normal to world space with the inverse
        transpose (translation dropped) and renormalizes it.
        """
        r0, r1, r2 = self._normal_rows
        x, y, z = n.x, n.y, n.z
        return Vector3(r0[0] * x + r0[1] * y + r0[2] * z,
                       r1[0] * x + r1[1] * y + r1[2] * z,
                       r2[0] * x + r2[1] * y + r2[2] * z).normalize()

    def __eq__(self, other) -> bool:
        if not isinstance(other, Transform):
            return NotImplemented
        return bool(np.allclose(self.matrix, other.matrix, atol=EPSILON))

    __hash__ = None

    def __getstate__(self):
        return {"matrix": np.array(self.matrix), "inverse": np.array(self.inverse_matrix)}

    def __setstate__(self, state):
        self._set(state["matrix"], state["inverse"])

    def __repr__(self) -> str:
        return f"Transform({self.matrix.tolist()})"
