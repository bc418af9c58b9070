# Constant formatting utilities for HLSL code generation

import numpy as np

from ...ir.types import DataType


def format_scalar(value) -> str:
    """
    Shortest decimal text that reads back as the same float32.

    2.0 -> "2", 0.5 -> "0.5", 0.1 -> "0.1". Slot values are edited as
    single-precision floats, so formatting goes through np.float32.
    """
    return np.format_float_positional(np.float32(value), trim='-')


def format_constant(value, dtype: DataType) -> str:
    """Format a slot value as an HLSL literal."""
    if value is None:
        value = dtype.default_value()

    if dtype == DataType.SCALAR:
        return format_scalar(value)
    elif dtype == DataType.VEC3:
        x, y, z = value
        return f"float3({format_scalar(x)}, {format_scalar(y)}, {format_scalar(z)})"

    raise TypeError(f"No literal format for {dtype}")
