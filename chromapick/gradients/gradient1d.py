from __future__ import annotations

import numpy as np
from numpy import ndarray as NDArray
from typing import Sequence

from boundednumbers import BoundType, bound_type_to_np_function

from ..colors.rgb import ColorLike, to_rgba_int
from ..types.spectrum_types import Axis


class Gradient1D:
    """
    A 1D RGBA color ramp through evenly spaced stops.

    The ramp is held as an immutable ``uint8`` array of shape (N, 4) with
    straight (non-premultiplied) alpha, ready for compositing.

    - First and last samples land exactly on the first and last stop
    - Sample coordinates are bounded with a ``boundednumbers`` strategy (clamp by default)
    - Interpolation runs on premultiplied channels, so a transparent stop
      fades alpha without dragging its own RGB into the neighbours
    """

    __slots__ = ('_value',)

    def __init__(self, value: NDArray) -> None:
        """
        Initialize from an RGBA array.

        Args:
            value: uint8 array of shape (N, 4)
        """
        value = np.asarray(value)
        if value.ndim != 2 or value.shape[-1] != 4:
            raise ValueError(f"Gradient1D requires (N, 4) array, got shape {value.shape}")
        value = value.astype(np.uint8, copy=True)
        value.setflags(write=False)
        self._value = value

    @classmethod
    def from_stops(
        cls,
        stops: Sequence[ColorLike],
        length: int,
        bound_type: BoundType = BoundType.CLAMP,
    ) -> Gradient1D:
        """
        Sample a linear gradient through ``stops`` at ``length`` pixels.

        Args:
            stops: Colors as color objects, int tuples or hex strings
            length: Number of samples; zero or negative yields an empty ramp
            bound_type: How sample coordinates outside [0, 1] are folded back

        Returns:
            Gradient1D of shape (max(length, 0), 4)
        """
        if length <= 0 or not stops:
            return cls(np.zeros((0, 4), dtype=np.uint8))

        premultiplied = _premultiply([to_rgba_int(s).unit_values for s in stops])

        u = np.linspace(0.0, 1.0, length, dtype=float)
        u = bound_type_to_np_function[bound_type](u, 0.0, 1.0)

        if len(premultiplied) == 1:
            sampled = np.repeat(premultiplied, length, axis=0)
        else:
            positions = np.linspace(0.0, 1.0, len(premultiplied), dtype=float)
            sampled = np.stack(
                [np.interp(u, positions, premultiplied[:, c]) for c in range(4)],
                axis=-1,
            )
        return cls(_unpremultiply_to_uint8(sampled))

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def value(self) -> NDArray:
        return self._value

    def __len__(self) -> int:
        return self._value.shape[0]

    def __array__(self, dtype=None, copy=None) -> NDArray:
        """Enable numpy array interface."""
        if dtype is None:
            return self._value
        return self._value.astype(dtype)

    def as_layer(self, width: int, height: int, axis: Axis) -> NDArray:
        """
        Spread the ramp into a (height, width, 4) layer.

        The ramp runs along ``axis`` and is constant across the other one.

        Raises:
            ValueError: if the ramp length does not match the extent of ``axis``
        """
        extent = width if axis == Axis.HORIZONTAL else height
        if len(self) != extent:
            raise ValueError(f"ramp has {len(self)} samples, {axis.value} extent is {extent}")
        if axis == Axis.HORIZONTAL:
            return np.tile(self._value[None, :, :], (height, 1, 1))
        return np.tile(self._value[:, None, :], (1, width, 1))


def _premultiply(units: Sequence[Sequence[float]]) -> NDArray:
    arr = np.asarray(units, dtype=float)
    out = arr.copy()
    out[:, :3] *= arr[:, 3:4]
    return out


def _unpremultiply_to_uint8(premultiplied: NDArray) -> NDArray:
    alpha = premultiplied[:, 3:4]
    rgb = np.divide(
        premultiplied[:, :3], alpha,
        out=np.zeros_like(premultiplied[:, :3]),
        where=alpha > 0,
    )
    straight = np.concatenate([rgb, alpha], axis=-1)
    return np.rint(np.clip(straight, 0.0, 1.0) * 255.0).astype(np.uint8)
