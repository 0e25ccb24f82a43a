"""
builders.py — Build torch modules and run torch functionals from option records

This module is the consumer side of the option records: it reads every
field of a record once and hands it to the matching ``torch.nn`` module
constructor or ``torch.nn.functional`` call. Dispatch is on the exact record
type, so specialized pooling records pick the module of their
dimensionality.

No validation is added here. Bounds, divisibility and "exactly one of"
checks are performed by torch itself when the module is built or the
function is called.

Functions
---------
build_module
    Construct the ``torch.nn.Module`` configured by a record.
call_functional
    Run the ``torch.nn.functional`` call configured by a record.
"""

import logging
from typing import Any, Callable, Dict

import torch
import torch.nn as nn
import torch.nn.functional as F

from . import activation as act
from . import functional as fn
from . import pooling as pool
from .pixelshuffle import PixelShuffleOptions
from .utils.exceptions import UnsupportedOptionsError

logger = logging.getLogger(__name__)


# ============================================================================
# Pooling helpers
# ============================================================================

def _avg_pool_module(module_cls: type) -> Callable:
    def build(o):
        kwargs = dict(kernel_size=o.kernel_size, stride=o.stride, padding=o.padding,
                      ceil_mode=o.ceil_mode, count_include_pad=o.count_include_pad)
        if o._dims > 1:
            kwargs['divisor_override'] = o.divisor_override
        elif o.divisor_override is not None:
            logger.debug('divisor_override=%s ignored by %s', o.divisor_override, module_cls.__name__)
        return module_cls(**kwargs)
    return build


def _avg_pool_functional(func: Callable) -> Callable:
    def call(o, x):
        kwargs = dict(kernel_size=o.kernel_size, stride=o.stride, padding=o.padding,
                      ceil_mode=o.ceil_mode, count_include_pad=o.count_include_pad)
        if o._dims > 1:
            kwargs['divisor_override'] = o.divisor_override
        elif o.divisor_override is not None:
            logger.debug('divisor_override=%s ignored by %s', o.divisor_override, func.__name__)
        return func(x, **kwargs)
    return call


def _lp_window(o):
    # lp_pool1d scales its output by kernel_size, which must be an int
    if o._dims == 1:
        return o.kernel_size[0], o.stride[0]
    return o.kernel_size, o.stride


# ============================================================================
# Module builders
# ============================================================================

_MODULE_BUILDERS: Dict[type, Callable[[Any], nn.Module]] = {
    act.ELUOptions: lambda o: nn.ELU(alpha=o.alpha, inplace=o.inplace),
    act.SELUOptions: lambda o: nn.SELU(inplace=o.inplace),
    act.GLUOptions: lambda o: nn.GLU(dim=o.dim),
    act.HardshrinkOptions: lambda o: nn.Hardshrink(lambd=o.lambd),
    act.HardtanhOptions: lambda o: nn.Hardtanh(min_val=o.min_val, max_val=o.max_val, inplace=o.inplace),
    act.LeakyReLUOptions: lambda o: nn.LeakyReLU(negative_slope=o.negative_slope, inplace=o.inplace),
    act.SoftmaxOptions: lambda o: nn.Softmax(dim=o.dim),
    act.SoftminOptions: lambda o: nn.Softmin(dim=o.dim),
    act.LogSoftmaxOptions: lambda o: nn.LogSoftmax(dim=o.dim),
    act.PReLUOptions: lambda o: nn.PReLU(num_parameters=o.num_parameters, init=o.init),
    act.ReLUOptions: lambda o: nn.ReLU(inplace=o.inplace),
    act.ReLU6Options: lambda o: nn.ReLU6(inplace=o.inplace),
    act.RReLUOptions: lambda o: nn.RReLU(lower=o.lower, upper=o.upper, inplace=o.inplace),
    act.CELUOptions: lambda o: nn.CELU(alpha=o.alpha, inplace=o.inplace),
    act.SoftplusOptions: lambda o: nn.Softplus(beta=o.beta, threshold=o.threshold),
    act.SoftshrinkOptions: lambda o: nn.Softshrink(lambd=o.lambd),
    act.ThresholdOptions: lambda o: nn.Threshold(threshold=o.threshold, value=o.value, inplace=o.inplace),
    act.MultiheadAttentionOptions: lambda o: nn.MultiheadAttention(
        o.embed_dim, o.num_heads, dropout=o.dropout, bias=o.bias, add_bias_kv=o.add_bias_kv,
        add_zero_attn=o.add_zero_attn, kdim=o.kdim, vdim=o.vdim),
    PixelShuffleOptions: lambda o: nn.PixelShuffle(o.upscale_factor),
    pool.AvgPool1dOptions: _avg_pool_module(nn.AvgPool1d),
    pool.AvgPool2dOptions: _avg_pool_module(nn.AvgPool2d),
    pool.AvgPool3dOptions: _avg_pool_module(nn.AvgPool3d),
}

for _options, _module in ((pool.MaxPool1dOptions, nn.MaxPool1d),
                          (pool.MaxPool2dOptions, nn.MaxPool2d),
                          (pool.MaxPool3dOptions, nn.MaxPool3d)):
    _MODULE_BUILDERS[_options] = lambda o, m=_module: m(
        kernel_size=o.kernel_size, stride=o.stride, padding=o.padding,
        dilation=o.dilation, ceil_mode=o.ceil_mode)

for _options, _module in ((pool.AdaptiveMaxPool1dOptions, nn.AdaptiveMaxPool1d),
                          (pool.AdaptiveMaxPool2dOptions, nn.AdaptiveMaxPool2d),
                          (pool.AdaptiveMaxPool3dOptions, nn.AdaptiveMaxPool3d),
                          (pool.AdaptiveAvgPool1dOptions, nn.AdaptiveAvgPool1d),
                          (pool.AdaptiveAvgPool2dOptions, nn.AdaptiveAvgPool2d),
                          (pool.AdaptiveAvgPool3dOptions, nn.AdaptiveAvgPool3d)):
    _MODULE_BUILDERS[_options] = lambda o, m=_module: m(o.output_size)

for _options, _module in ((pool.MaxUnpool1dOptions, nn.MaxUnpool1d),
                          (pool.MaxUnpool2dOptions, nn.MaxUnpool2d),
                          (pool.MaxUnpool3dOptions, nn.MaxUnpool3d)):
    _MODULE_BUILDERS[_options] = lambda o, m=_module: m(
        kernel_size=o.kernel_size, stride=o.stride, padding=o.padding)

for _options, _module in ((pool.FractionalMaxPool2dOptions, nn.FractionalMaxPool2d),
                          (pool.FractionalMaxPool3dOptions, nn.FractionalMaxPool3d)):
    _MODULE_BUILDERS[_options] = lambda o, m=_module: m(
        o.kernel_size, output_size=o.output_size, output_ratio=o.output_ratio,
        _random_samples=o.random_samples)

for _options, _module in ((pool.LPPool1dOptions, nn.LPPool1d),
                          (pool.LPPool2dOptions, nn.LPPool2d)):
    _MODULE_BUILDERS[_options] = lambda o, m=_module: m(
        o.norm_type, *_lp_window(o), ceil_mode=o.ceil_mode)


# ============================================================================
# Functional callers
# ============================================================================

_FUNCTIONAL_CALLERS: Dict[type, Callable[..., Any]] = {
    fn.ELUFuncOptions: lambda o, x: F.elu(x, alpha=o.alpha, inplace=o.inplace),
    fn.SELUFuncOptions: lambda o, x: F.selu(x, inplace=o.inplace),
    fn.GLUFuncOptions: lambda o, x: F.glu(x, dim=o.dim),
    fn.HardshrinkFuncOptions: lambda o, x: F.hardshrink(x, o.lambd),
    fn.HardtanhFuncOptions: lambda o, x: F.hardtanh(x, min_val=o.min_val, max_val=o.max_val, inplace=o.inplace),
    fn.LeakyReLUFuncOptions: lambda o, x: F.leaky_relu(x, negative_slope=o.negative_slope, inplace=o.inplace),
    fn.SoftmaxFuncOptions: lambda o, x: F.softmax(x, dim=o.dim, dtype=o.dtype),
    fn.SoftminFuncOptions: lambda o, x: F.softmin(x, dim=o.dim, dtype=o.dtype),
    fn.LogSoftmaxFuncOptions: lambda o, x: F.log_softmax(x, dim=o.dim, dtype=o.dtype),
    fn.ReLUFuncOptions: lambda o, x: F.relu(x, inplace=o.inplace),
    fn.ReLU6FuncOptions: lambda o, x: F.relu6(x, inplace=o.inplace),
    fn.RReLUFuncOptions: lambda o, x: F.rrelu(x, lower=o.lower, upper=o.upper,
                                              training=o.training, inplace=o.inplace),
    fn.CELUFuncOptions: lambda o, x: F.celu(x, alpha=o.alpha, inplace=o.inplace),
    fn.SoftplusFuncOptions: lambda o, x: F.softplus(x, beta=o.beta, threshold=o.threshold),
    fn.SoftshrinkFuncOptions: lambda o, x: F.softshrink(x, o.lambd),
    fn.ThresholdFuncOptions: lambda o, x: F.threshold(x, o.threshold, o.value, inplace=o.inplace),
    fn.GumbelSoftmaxFuncOptions: lambda o, logits: F.gumbel_softmax(logits, tau=o.tau, hard=o.hard, dim=o.dim),
    fn.MultiheadAttentionForwardFuncOptions: lambda o, query, key, value: F.multi_head_attention_forward(
        query, key, value, o.embed_dim_to_check, o.num_heads, o.in_proj_weight, o.in_proj_bias,
        o.bias_k, o.bias_v, o.add_zero_attn, o.dropout_p, o.out_proj_weight, o.out_proj_bias,
        training=o.training, key_padding_mask=o.key_padding_mask, need_weights=o.need_weights,
        attn_mask=o.attn_mask, use_separate_proj_weight=o.use_separate_proj_weight,
        q_proj_weight=o.q_proj_weight, k_proj_weight=o.k_proj_weight, v_proj_weight=o.v_proj_weight,
        static_k=o.static_k, static_v=o.static_v),
    fn.PixelShuffleFuncOptions: lambda o, x: F.pixel_shuffle(x, o.upscale_factor),
    fn.AvgPool1dFuncOptions: _avg_pool_functional(F.avg_pool1d),
    fn.AvgPool2dFuncOptions: _avg_pool_functional(F.avg_pool2d),
    fn.AvgPool3dFuncOptions: _avg_pool_functional(F.avg_pool3d),
}

for _options, _func in ((fn.MaxPool1dFuncOptions, F.max_pool1d),
                        (fn.MaxPool2dFuncOptions, F.max_pool2d),
                        (fn.MaxPool3dFuncOptions, F.max_pool3d)):
    _FUNCTIONAL_CALLERS[_options] = lambda o, x, f=_func: f(
        x, o.kernel_size, stride=o.stride, padding=o.padding,
        dilation=o.dilation, ceil_mode=o.ceil_mode)

for _options, _func in ((fn.AdaptiveMaxPool1dFuncOptions, F.adaptive_max_pool1d),
                        (fn.AdaptiveMaxPool2dFuncOptions, F.adaptive_max_pool2d),
                        (fn.AdaptiveMaxPool3dFuncOptions, F.adaptive_max_pool3d),
                        (fn.AdaptiveAvgPool1dFuncOptions, F.adaptive_avg_pool1d),
                        (fn.AdaptiveAvgPool2dFuncOptions, F.adaptive_avg_pool2d),
                        (fn.AdaptiveAvgPool3dFuncOptions, F.adaptive_avg_pool3d)):
    _FUNCTIONAL_CALLERS[_options] = lambda o, x, f=_func: f(x, o.output_size)

for _options, _func in ((fn.MaxUnpool1dFuncOptions, F.max_unpool1d),
                        (fn.MaxUnpool2dFuncOptions, F.max_unpool2d),
                        (fn.MaxUnpool3dFuncOptions, F.max_unpool3d)):
    _FUNCTIONAL_CALLERS[_options] = lambda o, x, indices, f=_func: f(
        x, indices, o.kernel_size, stride=o.stride, padding=o.padding,
        output_size=o.output_size)

for _options, _func in ((fn.FractionalMaxPool2dFuncOptions, F.fractional_max_pool2d),
                        (fn.FractionalMaxPool3dFuncOptions, F.fractional_max_pool3d)):
    _FUNCTIONAL_CALLERS[_options] = lambda o, x, f=_func: f(
        x, o.kernel_size, output_size=o.output_size, output_ratio=o.output_ratio,
        _random_samples=o.random_samples)

for _options, _func in ((fn.LPPool1dFuncOptions, F.lp_pool1d),
                        (fn.LPPool2dFuncOptions, F.lp_pool2d)):
    _FUNCTIONAL_CALLERS[_options] = lambda o, x, f=_func: f(
        x, o.norm_type, *_lp_window(o), ceil_mode=o.ceil_mode)

del _options, _module, _func


# ============================================================================
# Public API
# ============================================================================

def build_module(options: Any) -> nn.Module:
    """
    Construct the ``torch.nn`` module configured by ``options``.

    Parameters
    ----------
    options : option record
        A module record, e.g. ``MaxPool2dOptions(3)`` or ``ELUOptions()``.

    Returns
    -------
    torch.nn.Module
        A freshly constructed module.

    Raises
    ------
    UnsupportedOptionsError
        If the record has no module counterpart, e.g.
        ``GumbelSoftmaxFuncOptions``.

    Examples
    --------
    >>> build_module(MaxPool2dOptions(3).set_stride(2))
    MaxPool2d(kernel_size=(3, 3), stride=(2, 2), padding=(0, 0), dilation=(1, 1), ceil_mode=False)
    """
    builder = _MODULE_BUILDERS.get(type(options))
    if builder is None:
        raise UnsupportedOptionsError(f"no torch.nn module is built from {type(options).__name__}")
    module = builder(options)
    logger.debug('Built %s from %r', type(module).__name__, options)
    return module


def call_functional(options: Any, *inputs: torch.Tensor) -> Any:
    """
    Run the ``torch.nn.functional`` call configured by ``options``.

    Parameters
    ----------
    options : option record
        A functional record, e.g. ``SoftmaxFuncOptions(1)``. Records aliased
        to their module form are accepted directly.
    *inputs : torch.Tensor
        ``input`` for most calls, ``(input, indices)`` for max unpooling and
        ``(query, key, value)`` for multi-head attention.

    Returns
    -------
    Any
        Whatever the torch function returns.

    Raises
    ------
    UnsupportedOptionsError
        If the record has no functional counterpart. ``PReLUFuncOptions``
        is one: ``torch.nn.functional.prelu`` takes a weight tensor.
    """
    caller = _FUNCTIONAL_CALLERS.get(type(options))
    if caller is None:
        raise UnsupportedOptionsError(
            f"no torch.nn.functional call is configured by {type(options).__name__}"
        )
    logger.debug('Calling functional for %r with %d input(s)', options, len(inputs))
    return caller(options, *inputs)
