"""
functional.py — Option records for ``torch.nn.functional`` calls

Most functional calls take exactly the fields of their module counterpart,
so their options are the module record itself, bound under a second name:
``ELUFuncOptions is ELUOptions``. Calls that need more than the module
stores get their own record:

- ``SoftmaxFuncOptions``, ``SoftminFuncOptions``, ``LogSoftmaxFuncOptions``
  add an optional ``dtype`` the input is cast to before the operation.
- ``RReLUFuncOptions`` adds ``training``, which a module takes from its own
  mode.
- ``MaxUnpoolFuncOptions`` adds an explicit ``output_size``.
- ``GumbelSoftmaxFuncOptions`` and ``MultiheadAttentionForwardFuncOptions``
  have no module record.

Examples
--------
>>> from nnoptions import functional as F
>>> F.SoftmaxFuncOptions(1).set_dtype(torch.float64).dtype
torch.float64
>>> F.MaxUnpool2dFuncOptions(2).set_output_size([1, 1, 4, 4]).output_size
[1, 1, 4, 4]
"""

from typing import List, Optional, Tuple

import torch

from .arg import options, arg
from .activation import (
    ELUOptions,
    SELUOptions,
    GLUOptions,
    HardshrinkOptions,
    HardtanhOptions,
    LeakyReLUOptions,
    PReLUOptions,
    ReLUOptions,
    ReLU6Options,
    CELUOptions,
    SoftplusOptions,
    SoftshrinkOptions,
    ThresholdOptions,
)
from .pooling import (
    AvgPool1dOptions,
    AvgPool2dOptions,
    AvgPool3dOptions,
    MaxPool1dOptions,
    MaxPool2dOptions,
    MaxPool3dOptions,
    AdaptiveMaxPool1dOptions,
    AdaptiveMaxPool2dOptions,
    AdaptiveMaxPool3dOptions,
    AdaptiveAvgPool1dOptions,
    AdaptiveAvgPool2dOptions,
    AdaptiveAvgPool3dOptions,
    FractionalMaxPool2dOptions,
    FractionalMaxPool3dOptions,
    LPPool1dOptions,
    LPPool2dOptions,
)
from .pixelshuffle import PixelShuffleOptions
from .utils import constants

# ============================================================================
# Activations
# ============================================================================

ELUFuncOptions = ELUOptions
SELUFuncOptions = SELUOptions
GLUFuncOptions = GLUOptions
HardshrinkFuncOptions = HardshrinkOptions
HardtanhFuncOptions = HardtanhOptions
LeakyReLUFuncOptions = LeakyReLUOptions
PReLUFuncOptions = PReLUOptions
ReLUFuncOptions = ReLUOptions
ReLU6FuncOptions = ReLU6Options
CELUFuncOptions = CELUOptions
SoftplusFuncOptions = SoftplusOptions
SoftshrinkFuncOptions = SoftshrinkOptions
ThresholdFuncOptions = ThresholdOptions


@options
class SoftmaxFuncOptions:
    """Options for ``torch.nn.functional.softmax``.

    Attributes
    ----------
    dim : int
        Dimension along which softmax is computed. Required.
    dtype : torch.dtype, optional
        If set, the input is cast to this type before the operation.
        Default is None.
    """
    dim: int = arg()
    dtype: Optional[torch.dtype] = arg(None, optional=True)


@options
class SoftminFuncOptions:
    """Options for ``torch.nn.functional.softmin``. See :class:`SoftmaxFuncOptions`."""
    dim: int = arg()
    dtype: Optional[torch.dtype] = arg(None, optional=True)


@options
class LogSoftmaxFuncOptions:
    """Options for ``torch.nn.functional.log_softmax``. See :class:`SoftmaxFuncOptions`."""
    dim: int = arg()
    dtype: Optional[torch.dtype] = arg(None, optional=True)


@options
class RReLUFuncOptions:
    """Options for ``torch.nn.functional.rrelu``.

    Attributes
    ----------
    lower : float
        Lower bound of the uniform distribution. Default is 1/8.
    upper : float
        Upper bound of the uniform distribution. Default is 1/3.
    training : bool
        Sample the slope at random instead of using the mean. Default is
        False.
    inplace : bool
        Whether to do the operation in-place. Default is False.
    """
    lower: float = arg(constants.DEFAULT_RRELU_LOWER)
    upper: float = arg(constants.DEFAULT_RRELU_UPPER)
    training: bool = arg(constants.DEFAULT_RRELU_TRAINING)
    inplace: bool = arg(constants.DEFAULT_INPLACE)


@options
class GumbelSoftmaxFuncOptions:
    """Options for ``torch.nn.functional.gumbel_softmax``.

    Attributes
    ----------
    tau : float
        Non-negative scalar temperature. Default is 1.0.
    hard : bool
        Return one-hot samples that are differentiated as the soft sample.
        Default is False.
    dim : int
        Dimension along which softmax is computed. Default is -1.
    """
    tau: float = arg(constants.DEFAULT_GUMBEL_TAU)
    hard: bool = arg(constants.DEFAULT_GUMBEL_HARD)
    dim: int = arg(constants.DEFAULT_GUMBEL_DIM)


@options
class MultiheadAttentionForwardFuncOptions:
    """
    Options for ``torch.nn.functional.multi_head_attention_forward``.

    The first ten fields are required and mirror the parameters a
    ``MultiheadAttention`` module owns. Tensor fields hold the caller's
    tensors without copying them; they are left out of record equality.

    Parameters
    ----------
    embed_dim_to_check : int
        Expected embedding size of the query.
    num_heads : int
        Number of parallel attention heads.
    in_proj_weight, in_proj_bias : torch.Tensor or None
        Packed input projection.
    bias_k, bias_v : torch.Tensor or None
        Bias added to the key and value sequences at dim 0.
    add_zero_attn : bool
        Add a batch of zeros to the key and value sequences at dim 1.
    dropout_p : float
        Dropout probability on the attention weights.
    out_proj_weight, out_proj_bias : torch.Tensor or None
        Output projection.
    training : bool, optional
        Apply dropout. Default is True.
    key_padding_mask : torch.Tensor, optional
        Keys to ignore. Default is None.
    need_weights : bool, optional
        Also return the attention weights. Default is True.
    attn_mask : torch.Tensor, optional
        Mask preventing attention to certain positions. Default is None.
    use_separate_proj_weight : bool, optional
        Use ``q_proj_weight``, ``k_proj_weight`` and ``v_proj_weight``
        instead of ``in_proj_weight``. Default is False.
    q_proj_weight, k_proj_weight, v_proj_weight : torch.Tensor, optional
        Separate input projections. Default is None.
    static_k, static_v : torch.Tensor, optional
        Static key and value used in place of the projected ones. Default
        is None.
    """
    embed_dim_to_check: int = arg()
    num_heads: int = arg()
    in_proj_weight: Optional[torch.Tensor] = arg(compare=False)
    in_proj_bias: Optional[torch.Tensor] = arg(compare=False)
    bias_k: Optional[torch.Tensor] = arg(compare=False)
    bias_v: Optional[torch.Tensor] = arg(compare=False)
    add_zero_attn: bool = arg()
    dropout_p: float = arg()
    out_proj_weight: torch.Tensor = arg(compare=False)
    out_proj_bias: Optional[torch.Tensor] = arg(compare=False)
    training: bool = arg(constants.DEFAULT_ATTENTION_TRAINING)
    key_padding_mask: Optional[torch.Tensor] = arg(None, optional=True, compare=False)
    need_weights: bool = arg(constants.DEFAULT_ATTENTION_NEED_WEIGHTS)
    attn_mask: Optional[torch.Tensor] = arg(None, optional=True, compare=False)
    use_separate_proj_weight: bool = arg(constants.DEFAULT_ATTENTION_SEPARATE_PROJ)
    q_proj_weight: Optional[torch.Tensor] = arg(None, optional=True, compare=False)
    k_proj_weight: Optional[torch.Tensor] = arg(None, optional=True, compare=False)
    v_proj_weight: Optional[torch.Tensor] = arg(None, optional=True, compare=False)
    static_k: Optional[torch.Tensor] = arg(None, optional=True, compare=False)
    static_v: Optional[torch.Tensor] = arg(None, optional=True, compare=False)


# ============================================================================
# Pixel shuffle
# ============================================================================

PixelShuffleFuncOptions = PixelShuffleOptions

# ============================================================================
# Pooling
# ============================================================================

AvgPool1dFuncOptions = AvgPool1dOptions
AvgPool2dFuncOptions = AvgPool2dOptions
AvgPool3dFuncOptions = AvgPool3dOptions

MaxPool1dFuncOptions = MaxPool1dOptions
MaxPool2dFuncOptions = MaxPool2dOptions
MaxPool3dFuncOptions = MaxPool3dOptions

AdaptiveMaxPool1dFuncOptions = AdaptiveMaxPool1dOptions
AdaptiveMaxPool2dFuncOptions = AdaptiveMaxPool2dOptions
AdaptiveMaxPool3dFuncOptions = AdaptiveMaxPool3dOptions

AdaptiveAvgPool1dFuncOptions = AdaptiveAvgPool1dOptions
AdaptiveAvgPool2dFuncOptions = AdaptiveAvgPool2dOptions
AdaptiveAvgPool3dFuncOptions = AdaptiveAvgPool3dOptions


@options(dimensional=True)
class MaxUnpoolFuncOptions:
    """
    Options for a D-dimensional ``torch.nn.functional.max_unpool`` call.

    Parameters
    ----------
    kernel_size : int or sequence of int
        The size of the max pooling window. Required.
    stride : int or sequence of int, optional
        The stride of the max pooling window. Defaults to ``kernel_size``.
    padding : int or sequence of int, optional
        Padding that was added to the input. Default is 0.
    output_size : list of int, optional
        The targeted output size, with or without the batch and channel
        dimensions. Default is None.
    """
    kernel_size: Tuple[int, ...] = arg(expand=True)
    stride: Tuple[int, ...] = arg(expand=True, derived_from='kernel_size')
    padding: Tuple[int, ...] = arg(constants.DEFAULT_POOL_PADDING, expand=True)
    output_size: Optional[List[int]] = arg(None, optional=True)


MaxUnpool1dFuncOptions = MaxUnpoolFuncOptions[1]
MaxUnpool2dFuncOptions = MaxUnpoolFuncOptions[2]
MaxUnpool3dFuncOptions = MaxUnpoolFuncOptions[3]

FractionalMaxPool2dFuncOptions = FractionalMaxPool2dOptions
FractionalMaxPool3dFuncOptions = FractionalMaxPool3dOptions

LPPool1dFuncOptions = LPPool1dOptions
LPPool2dFuncOptions = LPPool2dOptions
