"""
nnoptions — Option records for torch neural-network layers and functionals

This package provides one plain configuration record per layer or
functional call: named fields with defaults, chained ``set_<field>``
setters, and per-dimension fields that broadcast a single number. The
records do no numerical work; :mod:`nnoptions.builders` hands them to
``torch.nn`` and ``torch.nn.functional``.

Modules
-------
activation
    Activation and multi-head attention module records.
pooling
    Generic pooling records and their 1-D, 2-D and 3-D specializations.
pixelshuffle
    Pixel shuffle module record.
functional
    ``*FuncOptions`` records for functional calls.
builders
    Build torch modules and run torch functionals from records.
arg
    The ``@options`` decorator and field declarations behind every record.
utils
    Constants, exceptions, validators and the command-line interface.

Usage
-----
    from nnoptions import MaxPool2dOptions, build_module
    from nnoptions import functional as F

    opts = MaxPool2dOptions(3).set_stride(2).set_padding(1)
    pool = build_module(opts)

    softmax = F.SoftmaxFuncOptions(1).set_dtype(torch.float64)

Notes
-----
- Records share no base class; each layer takes exactly its own record.
- Cross-field checks (bounds ordering, head divisibility) are left to torch.
"""

import logging

from .arg import options, arg, option_fields, options_to_dict, options_from_dict, is_option_record
from .expanding_array import expanding_array
from .activation import (
    ELUOptions,
    SELUOptions,
    GLUOptions,
    HardshrinkOptions,
    HardtanhOptions,
    LeakyReLUOptions,
    SoftmaxOptions,
    SoftminOptions,
    LogSoftmaxOptions,
    PReLUOptions,
    ReLUOptions,
    ReLU6Options,
    RReLUOptions,
    CELUOptions,
    SoftplusOptions,
    SoftshrinkOptions,
    ThresholdOptions,
    MultiheadAttentionOptions,
)
from .pooling import (
    AvgPoolOptions,
    AvgPool1dOptions,
    AvgPool2dOptions,
    AvgPool3dOptions,
    MaxPoolOptions,
    MaxPool1dOptions,
    MaxPool2dOptions,
    MaxPool3dOptions,
    AdaptiveMaxPoolOptions,
    AdaptiveMaxPool1dOptions,
    AdaptiveMaxPool2dOptions,
    AdaptiveMaxPool3dOptions,
    AdaptiveAvgPoolOptions,
    AdaptiveAvgPool1dOptions,
    AdaptiveAvgPool2dOptions,
    AdaptiveAvgPool3dOptions,
    MaxUnpoolOptions,
    MaxUnpool1dOptions,
    MaxUnpool2dOptions,
    MaxUnpool3dOptions,
    FractionalMaxPoolOptions,
    FractionalMaxPool2dOptions,
    FractionalMaxPool3dOptions,
    LPPoolOptions,
    LPPool1dOptions,
    LPPool2dOptions,
)
from .pixelshuffle import PixelShuffleOptions
from . import functional
from .builders import build_module, call_functional
from .utils.exceptions import (
    OptionsError,
    ShapeMismatchError,
    InvalidDimensionalityError,
    ConfigurationError,
    UnsupportedOptionsError,
)

# Prevent 'No handler could be found' warnings if imported before logging configured
logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    'options',
    'arg',
    'option_fields',
    'options_to_dict',
    'options_from_dict',
    'is_option_record',
    'expanding_array',
    'ELUOptions',
    'SELUOptions',
    'GLUOptions',
    'HardshrinkOptions',
    'HardtanhOptions',
    'LeakyReLUOptions',
    'SoftmaxOptions',
    'SoftminOptions',
    'LogSoftmaxOptions',
    'PReLUOptions',
    'ReLUOptions',
    'ReLU6Options',
    'RReLUOptions',
    'CELUOptions',
    'SoftplusOptions',
    'SoftshrinkOptions',
    'ThresholdOptions',
    'MultiheadAttentionOptions',
    'AvgPoolOptions',
    'AvgPool1dOptions',
    'AvgPool2dOptions',
    'AvgPool3dOptions',
    'MaxPoolOptions',
    'MaxPool1dOptions',
    'MaxPool2dOptions',
    'MaxPool3dOptions',
    'AdaptiveMaxPoolOptions',
    'AdaptiveMaxPool1dOptions',
    'AdaptiveMaxPool2dOptions',
    'AdaptiveMaxPool3dOptions',
    'AdaptiveAvgPoolOptions',
    'AdaptiveAvgPool1dOptions',
    'AdaptiveAvgPool2dOptions',
    'AdaptiveAvgPool3dOptions',
    'MaxUnpoolOptions',
    'MaxUnpool1dOptions',
    'MaxUnpool2dOptions',
    'MaxUnpool3dOptions',
    'FractionalMaxPoolOptions',
    'FractionalMaxPool2dOptions',
    'FractionalMaxPool3dOptions',
    'LPPoolOptions',
    'LPPool1dOptions',
    'LPPool2dOptions',
    'PixelShuffleOptions',
    'functional',
    'build_module',
    'call_functional',
    'OptionsError',
    'ShapeMismatchError',
    'InvalidDimensionalityError',
    'ConfigurationError',
    'UnsupportedOptionsError',
]

__version__ = '1.0.0'
