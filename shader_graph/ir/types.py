from enum import Enum, auto

import numpy as np

from ..errors import ValueTypeError

# Largest magnitude a literal may have: slot values are emitted as float32
FLOAT32_MAX = float(np.finfo(np.float32).max)


def _to_float32_range(value, dtype) -> float:
    try:
        f = float(value)
    except OverflowError:
        raise ValueTypeError(f"Value out of range for {dtype}: {value!r}")
    if not np.isfinite(f) or abs(f) > FLOAT32_MAX:
        raise ValueTypeError(f"Value out of range for {dtype}: {value!r}")
    return f


class DataType(Enum):
    # Connections are only made between sockets of identical DataType.
    SCALAR = auto()
    VEC3 = auto()

    def is_vector(self):
        return self == DataType.VEC3

    def is_scalar(self):
        return self == DataType.SCALAR

    def component_count(self):
        if self == DataType.VEC3: return 3
        return 1

    def hlsl_type(self) -> str:
        """HLSL type used for local declarations."""
        if self.is_vector():
            return "float3"
        return "float"

    def default_value(self):
        """Zero value stored in a slot when the socket has no literal default."""
        if self.is_vector():
            return (0.0,) * self.component_count()
        return 0.0

    def coerce_value(self, value):
        """
        Normalise a user value to this type's Python shape.

        Scalars become float, vectors a 3-tuple of float. A single number is
        not broadcast to a vector: the editor always edits all components.
        Values must be finite and fit in a float32.
        """
        if self.is_scalar():
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ValueTypeError(f"Expected a number for {self}, got {value!r}")
            return _to_float32_range(value, self)

        count = self.component_count()
        if isinstance(value, (str, bytes)) or not hasattr(value, '__iter__'):
            raise ValueTypeError(f"Expected {count} components for {self}, got {value!r}")
        components = tuple(value)
        if len(components) != count:
            raise ValueTypeError(f"Expected {count} components for {self}, got {len(components)}")
        try:
            return tuple(_to_float32_range(c, self) for c in components)
        except (TypeError, ValueError) as e:
            raise ValueTypeError(f"Invalid component in {value!r}: {e}")

    def __str__(self):
        return self.name.lower()
