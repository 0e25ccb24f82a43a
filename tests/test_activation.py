import pytest

from nnoptions import (
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


def test_defaults():
    assert ELUOptions() == ELUOptions(alpha=1.0, inplace=False)
    assert SELUOptions().inplace is False
    assert GLUOptions().dim == -1
    assert HardshrinkOptions().lambd == 0.5
    assert SoftshrinkOptions().lambd == 0.5
    assert HardtanhOptions() == HardtanhOptions(min_val=-1.0, max_val=1.0, inplace=False)
    assert LeakyReLUOptions().negative_slope == 0.01
    assert LeakyReLUOptions().inplace is False
    assert PReLUOptions() == PReLUOptions(num_parameters=1, init=0.25)
    assert ReLUOptions().inplace is False
    assert ReLU6Options().inplace is False
    assert RReLUOptions().lower == pytest.approx(1.0 / 8.0)
    assert RReLUOptions().upper == pytest.approx(1.0 / 3.0)
    assert CELUOptions() == CELUOptions(alpha=1.0, inplace=False)
    assert SoftplusOptions().beta == 1.0
    assert SoftplusOptions().threshold == 20.0


def test_single_positional_argument():
    assert SELUOptions(True).inplace is True
    assert GLUOptions(1).dim == 1
    assert HardshrinkOptions(42.42).lambd == 42.42
    assert ReLUOptions(True).inplace is True


def test_required_dim():
    assert SoftmaxOptions(1).dim == 1
    assert SoftminOptions(0).dim == 0
    assert LogSoftmaxOptions(-1).dim == -1
    with pytest.raises(TypeError):
        SoftmaxOptions()


def test_threshold_requires_threshold_and_value():
    opts = ThresholdOptions(42.42, 24.24).set_inplace(True)
    assert (opts.threshold, opts.value, opts.inplace) == (42.42, 24.24, True)
    with pytest.raises(TypeError):
        ThresholdOptions(1.0)


def test_no_cross_field_validation():
    opts = RReLUOptions().set_lower(0.9).set_upper(0.1)
    assert opts.lower > opts.upper
    opts = HardtanhOptions(min_val=2.0, max_val=-2.0)
    assert opts.min_val > opts.max_val
    opts = MultiheadAttentionOptions(10, 3)
    assert opts.embed_dim % opts.num_heads != 0


def test_multihead_attention_defaults():
    opts = MultiheadAttentionOptions(20, 10)
    assert opts.dropout == 0.0
    assert opts.bias is True
    assert opts.add_bias_kv is False
    assert opts.add_zero_attn is False
    assert opts.kdim == 20
    assert opts.vdim == 20


def test_multihead_attention_kdim_is_copied_once():
    opts = MultiheadAttentionOptions(20, 10)
    opts.set_embed_dim(40)
    assert opts.kdim == 20
    assert opts.vdim == 20


def test_multihead_attention_explicit_kdim_wins():
    opts = MultiheadAttentionOptions(20, 10, kdim=8, vdim=12)
    assert (opts.kdim, opts.vdim) == (8, 12)
    assert MultiheadAttentionOptions(20, 10).set_kdim(4).kdim == 4


def test_attribute_assignment_matches_setter():
    opts = ELUOptions()
    opts.alpha = 0.42
    assert opts == ELUOptions().set_alpha(0.42)


def test_multihead_attention_kdim_none_follows_embed_dim():
    opts = MultiheadAttentionOptions(20, 10, kdim=8).set_embed_dim(32)
    assert opts.set_kdim(None).kdim == 32
