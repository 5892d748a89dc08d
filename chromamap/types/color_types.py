from __future__ import annotations
from typing import Tuple, Union
from numpy import ndarray

Scalar = int | float
Color = int  # packed 0xAARRGGBB
ColorLike = Union[int, str]
ARGBTuple = Tuple[Scalar, Scalar, Scalar, Scalar]
HSVTuple = Tuple[float, float, float]
ArrayOrScalar = Union[Scalar, ndarray]
