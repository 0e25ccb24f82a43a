"""
activation.py — Option records for activation and attention modules

Each record configures one ``torch.nn`` activation module. Records are
independent types with no shared base class; the functional forms live in
:mod:`nnoptions.functional`, where most of them are the very same classes.

Classes
-------
ELUOptions, SELUOptions, GLUOptions, HardshrinkOptions, HardtanhOptions,
LeakyReLUOptions, SoftmaxOptions, SoftminOptions, LogSoftmaxOptions,
PReLUOptions, ReLUOptions, ReLU6Options, RReLUOptions, CELUOptions,
SoftplusOptions, SoftshrinkOptions, ThresholdOptions
    Activation module options.
MultiheadAttentionOptions
    Options for ``torch.nn.MultiheadAttention``.

Examples
--------
>>> ELUOptions().set_alpha(42.42).set_inplace(True)
ELUOptions(alpha=42.42, inplace=True)
>>> ThresholdOptions(0.1, 20.0).set_inplace(True)
ThresholdOptions(threshold=0.1, value=20.0, inplace=True)
"""

from .arg import options, arg
from .utils import constants


@options
class ELUOptions:
    """Options for the ``ELU`` module.

    Attributes
    ----------
    alpha : float
        The alpha value of the ELU formulation. Default is 1.0.
    inplace : bool
        Whether to do the operation in-place. Default is False.
    """
    alpha: float = arg(constants.DEFAULT_ELU_ALPHA)
    inplace: bool = arg(constants.DEFAULT_INPLACE)


@options
class SELUOptions:
    """Options for the ``SELU`` module."""
    inplace: bool = arg(constants.DEFAULT_INPLACE)


@options
class GLUOptions:
    """Options for the ``GLU`` module.

    Attributes
    ----------
    dim : int
        The dimension on which to split the input. Default is -1.
    """
    dim: int = arg(constants.DEFAULT_GLU_DIM)


@options
class HardshrinkOptions:
    """Options for the ``Hardshrink`` module.

    ``lambda`` is a Python keyword, so the field is named ``lambd`` as in
    ``torch.nn.Hardshrink``.
    """
    lambd: float = arg(constants.DEFAULT_SHRINK_LAMBDA)


@options
class HardtanhOptions:
    """Options for the ``Hardtanh`` module.

    Attributes
    ----------
    min_val : float
        Minimum value of the linear region range. Default is -1.
    max_val : float
        Maximum value of the linear region range. Default is 1.
    inplace : bool
        Whether to do the operation in-place. Default is False.

    Notes
    -----
    ``min_val <= max_val`` is not checked here.
    """
    min_val: float = arg(constants.DEFAULT_HARDTANH_MIN_VAL)
    max_val: float = arg(constants.DEFAULT_HARDTANH_MAX_VAL)
    inplace: bool = arg(constants.DEFAULT_INPLACE)


@options
class LeakyReLUOptions:
    """Options for the ``LeakyReLU`` module.

    Attributes
    ----------
    negative_slope : float
        Controls the angle of the negative slope. Default is 1e-2.
    inplace : bool
        Whether to do the operation in-place. Default is False.
    """
    negative_slope: float = arg(constants.DEFAULT_LEAKY_RELU_NEGATIVE_SLOPE)
    inplace: bool = arg(constants.DEFAULT_INPLACE)


@options
class SoftmaxOptions:
    """Options for the ``Softmax`` module. ``dim`` is required."""
    dim: int = arg()


@options
class SoftminOptions:
    """Options for the ``Softmin`` module. ``dim`` is required."""
    dim: int = arg()


@options
class LogSoftmaxOptions:
    """Options for the ``LogSoftmax`` module. ``dim`` is required."""
    dim: int = arg()


@options
class PReLUOptions:
    """Options for the ``PReLU`` module.

    Attributes
    ----------
    num_parameters : int
        Number of ``a`` to learn. Only 1 or the number of input channels
        are meaningful. Default is 1.
    init : float
        Initial value of ``a``. Default is 0.25.
    """
    num_parameters: int = arg(constants.DEFAULT_PRELU_NUM_PARAMETERS)
    init: float = arg(constants.DEFAULT_PRELU_INIT)


@options
class ReLUOptions:
    """Options for the ``ReLU`` module."""
    inplace: bool = arg(constants.DEFAULT_INPLACE)


@options
class ReLU6Options:
    """Options for the ``ReLU6`` module."""
    inplace: bool = arg(constants.DEFAULT_INPLACE)


@options
class RReLUOptions:
    """Options for the ``RReLU`` module.

    Attributes
    ----------
    lower : float
        Lower bound of the uniform distribution. Default is 1/8.
    upper : float
        Upper bound of the uniform distribution. Default is 1/3.
    inplace : bool
        Whether to do the operation in-place. Default is False.

    Notes
    -----
    ``lower <= upper`` is not checked here.
    """
    lower: float = arg(constants.DEFAULT_RRELU_LOWER)
    upper: float = arg(constants.DEFAULT_RRELU_UPPER)
    inplace: bool = arg(constants.DEFAULT_INPLACE)


@options
class CELUOptions:
    """Options for the ``CELU`` module.

    Attributes
    ----------
    alpha : float
        The alpha value of the CELU formulation. Default is 1.0.
    inplace : bool
        Whether to do the operation in-place. Default is False.
    """
    alpha: float = arg(constants.DEFAULT_CELU_ALPHA)
    inplace: bool = arg(constants.DEFAULT_INPLACE)


@options
class SoftplusOptions:
    """Options for the ``Softplus`` module.

    Attributes
    ----------
    beta : float
        The beta value of the Softplus formulation. Default is 1.
    threshold : float
        Values above this revert to a linear function. Default is 20.
    """
    beta: float = arg(constants.DEFAULT_SOFTPLUS_BETA)
    threshold: float = arg(constants.DEFAULT_SOFTPLUS_THRESHOLD)


@options
class SoftshrinkOptions:
    """Options for the ``Softshrink`` module. See :class:`HardshrinkOptions`."""
    lambd: float = arg(constants.DEFAULT_SHRINK_LAMBDA)


@options
class ThresholdOptions:
    """Options for the ``Threshold`` module.

    Attributes
    ----------
    threshold : float
        The value to threshold at. Required.
    value : float
        The value to replace with. Required.
    inplace : bool
        Whether to do the operation in-place. Default is False.
    """
    threshold: float = arg()
    value: float = arg()
    inplace: bool = arg(constants.DEFAULT_INPLACE)


@options
class MultiheadAttentionOptions:
    """
    Options for the ``MultiheadAttention`` module.

    Parameters
    ----------
    embed_dim : int
        Total dimension of the model. Required.
    num_heads : int
        Number of parallel attention heads. Required.
    dropout : float, optional
        Dropout probability on the attention weights. Default is 0.0.
    bias : bool, optional
        Whether to add bias as a module parameter. Default is True.
    add_bias_kv : bool, optional
        Whether to add bias to the key and value sequences at dim 0.
        Default is False.
    add_zero_attn : bool, optional
        Whether to add a new batch of zeros to the key and value sequences
        at dim 1. Default is False.
    kdim : int, optional
        Total number of features in the key. Defaults to ``embed_dim``.
    vdim : int, optional
        Total number of features in the value. Defaults to ``embed_dim``.

    Notes
    -----
    ``kdim`` and ``vdim`` copy ``embed_dim`` when the record is built;
    changing ``embed_dim`` afterwards leaves them alone. Divisibility of
    ``embed_dim`` by ``num_heads`` is checked by ``torch.nn.MultiheadAttention``.

    Examples
    --------
    >>> MultiheadAttentionOptions(20, 10).set_bias(False).bias
    False
    """
    embed_dim: int = arg()
    num_heads: int = arg()
    dropout: float = arg(constants.DEFAULT_ATTENTION_DROPOUT)
    bias: bool = arg(constants.DEFAULT_ATTENTION_BIAS)
    add_bias_kv: bool = arg(constants.DEFAULT_ATTENTION_ADD_BIAS_KV)
    add_zero_attn: bool = arg(constants.DEFAULT_ATTENTION_ADD_ZERO_ATTN)
    kdim: int = arg(derived_from='embed_dim')
    vdim: int = arg(derived_from='embed_dim')
