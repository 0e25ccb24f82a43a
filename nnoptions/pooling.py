"""
pooling.py — Option records for pooling and unpooling modules

Every pooling family is written once as a generic record over the number
of spatial dimensions, then specialized for the 1-D, 2-D and 3-D modules
with ``Record[D]``. Per-dimension fields accept a single number, which is
repeated for every dimension, or one entry per dimension.

Windowed records copy ``kernel_size`` into ``stride`` when no stride is
given. The copy happens once, at construction.

Classes
-------
AvgPoolOptions, MaxPoolOptions, AdaptiveMaxPoolOptions, AdaptiveAvgPoolOptions,
MaxUnpoolOptions, FractionalMaxPoolOptions, LPPoolOptions
    Generic records, specialized below.

Examples
--------
>>> AvgPool2dOptions(3).kernel_size
(3, 3)
>>> MaxPool2dOptions([3, 2]).set_stride([2, 2]).stride
(2, 2)
>>> LPPool1dOptions(1, 2).set_stride(5).set_ceil_mode(True)
LPPool1dOptions(norm_type=1, kernel_size=(2,), stride=(5,), ceil_mode=True)
"""

from typing import Optional, Tuple

import torch

from .arg import options, arg
from .utils import constants


@options(dimensional=True)
class AvgPoolOptions:
    """
    Options for a D-dimensional average pooling module.

    Parameters
    ----------
    kernel_size : int or sequence of int
        The size of the window to take an average over. Required.
    stride : int or sequence of int, optional
        The stride of the window. Defaults to ``kernel_size``.
    padding : int or sequence of int, optional
        Implicit zero padding added on both sides. Default is 0.
    ceil_mode : bool, optional
        Use ``ceil`` instead of ``floor`` to compute the output shape.
        Default is False.
    count_include_pad : bool, optional
        Include the zero-padding in the averaging calculation. Default is
        True.
    divisor_override : int, optional
        Divisor used instead of the window size. Default is None.
    """
    kernel_size: Tuple[int, ...] = arg(expand=True)
    stride: Tuple[int, ...] = arg(expand=True, derived_from='kernel_size')
    padding: Tuple[int, ...] = arg(constants.DEFAULT_POOL_PADDING, expand=True)
    ceil_mode: bool = arg(constants.DEFAULT_POOL_CEIL_MODE)
    count_include_pad: bool = arg(constants.DEFAULT_POOL_COUNT_INCLUDE_PAD)
    divisor_override: Optional[int] = arg(None, optional=True)


AvgPool1dOptions = AvgPoolOptions[1]
AvgPool2dOptions = AvgPoolOptions[2]
AvgPool3dOptions = AvgPoolOptions[3]


@options(dimensional=True)
class MaxPoolOptions:
    """
    Options for a D-dimensional max pooling module.

    Parameters
    ----------
    kernel_size : int or sequence of int
        The size of the window to take a max over. Required.
    stride : int or sequence of int, optional
        The stride of the window. Defaults to ``kernel_size``.
    padding : int or sequence of int, optional
        Implicit zero padding added on both sides. Default is 0.
    dilation : int or sequence of int, optional
        Stride of elements in the window. Default is 1.
    ceil_mode : bool, optional
        Use ``ceil`` instead of ``floor`` to compute the output shape.
        Default is False.
    """
    kernel_size: Tuple[int, ...] = arg(expand=True)
    stride: Tuple[int, ...] = arg(expand=True, derived_from='kernel_size')
    padding: Tuple[int, ...] = arg(constants.DEFAULT_POOL_PADDING, expand=True)
    dilation: Tuple[int, ...] = arg(constants.DEFAULT_POOL_DILATION, expand=True)
    ceil_mode: bool = arg(constants.DEFAULT_POOL_CEIL_MODE)


MaxPool1dOptions = MaxPoolOptions[1]
MaxPool2dOptions = MaxPoolOptions[2]
MaxPool3dOptions = MaxPoolOptions[3]


@options(dimensional=True)
class AdaptiveMaxPoolOptions:
    """Options for a D-dimensional adaptive max pooling module.

    Attributes
    ----------
    output_size : tuple of int
        The target output size. Required.
    """
    output_size: Tuple[int, ...] = arg(expand=True)


AdaptiveMaxPool1dOptions = AdaptiveMaxPoolOptions[1]
AdaptiveMaxPool2dOptions = AdaptiveMaxPoolOptions[2]
AdaptiveMaxPool3dOptions = AdaptiveMaxPoolOptions[3]


@options(dimensional=True)
class AdaptiveAvgPoolOptions:
    """Options for a D-dimensional adaptive average pooling module."""
    output_size: Tuple[int, ...] = arg(expand=True)


AdaptiveAvgPool1dOptions = AdaptiveAvgPoolOptions[1]
AdaptiveAvgPool2dOptions = AdaptiveAvgPoolOptions[2]
AdaptiveAvgPool3dOptions = AdaptiveAvgPoolOptions[3]


@options(dimensional=True)
class MaxUnpoolOptions:
    """
    Options for a D-dimensional max unpooling module.

    Parameters
    ----------
    kernel_size : int or sequence of int
        The size of the max pooling window. Required.
    stride : int or sequence of int, optional
        The stride of the max pooling window. Defaults to ``kernel_size``.
    padding : int or sequence of int, optional
        Padding that was added to the input. Default is 0.
    """
    kernel_size: Tuple[int, ...] = arg(expand=True)
    stride: Tuple[int, ...] = arg(expand=True, derived_from='kernel_size')
    padding: Tuple[int, ...] = arg(constants.DEFAULT_POOL_PADDING, expand=True)


MaxUnpool1dOptions = MaxUnpoolOptions[1]
MaxUnpool2dOptions = MaxUnpoolOptions[2]
MaxUnpool3dOptions = MaxUnpoolOptions[3]


@options(dimensional=True)
class FractionalMaxPoolOptions:
    """
    Options for a D-dimensional fractional max pooling module.

    Parameters
    ----------
    kernel_size : int or sequence of int
        The size of the window to take a max over. Required.
    output_size : int or sequence of int, optional
        The target output size. Default is None.
    output_ratio : float or sequence of float, optional
        Output size as a ratio of the input size, each entry in (0, 1).
        Default is None.
    random_samples : torch.Tensor, optional
        Pre-drawn pooling samples. Default is None.

    Notes
    -----
    ``torch.nn`` requires exactly one of ``output_size`` and
    ``output_ratio``; that is checked when the module is built.
    """
    kernel_size: Tuple[int, ...] = arg(expand=True)
    output_size: Optional[Tuple[int, ...]] = arg(None, expand=True, optional=True)
    output_ratio: Optional[Tuple[float, ...]] = arg(None, expand=True, dtype=float, optional=True)
    random_samples: Optional[torch.Tensor] = arg(None, optional=True, compare=False)


FractionalMaxPool2dOptions = FractionalMaxPoolOptions[2]
FractionalMaxPool3dOptions = FractionalMaxPoolOptions[3]


@options(dimensional=True)
class LPPoolOptions:
    """
    Options for a D-dimensional power-average pooling module.

    Parameters
    ----------
    norm_type : float
        The exponent ``p`` of the power average. Required.
    kernel_size : int or sequence of int
        The size of the window. Required.
    stride : int or sequence of int, optional
        The stride of the window. Defaults to ``kernel_size``.
    ceil_mode : bool, optional
        Use ``ceil`` instead of ``floor`` to compute the output shape.
        Default is False.
    """
    norm_type: float = arg()
    kernel_size: Tuple[int, ...] = arg(expand=True)
    stride: Tuple[int, ...] = arg(expand=True, derived_from='kernel_size')
    ceil_mode: bool = arg(constants.DEFAULT_POOL_CEIL_MODE)


LPPool1dOptions = LPPoolOptions[1]
LPPool2dOptions = LPPoolOptions[2]
