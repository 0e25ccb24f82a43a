import pytest
import torch
import torch.nn as nn
import torch.nn.functional as TF

from nnoptions import (
    build_module,
    call_functional,
    functional as F,
    ELUOptions,
    HardshrinkOptions,
    LeakyReLUOptions,
    PReLUOptions,
    ThresholdOptions,
    MultiheadAttentionOptions,
    PixelShuffleOptions,
    AvgPool1dOptions,
    AvgPool2dOptions,
    MaxPool2dOptions,
    AdaptiveAvgPool2dOptions,
    MaxUnpool2dOptions,
    FractionalMaxPool2dOptions,
    LPPool1dOptions,
    LPPool2dOptions,
    UnsupportedOptionsError,
)


def test_activation_modules():
    module = build_module(ELUOptions().set_alpha(0.5).set_inplace(True))
    assert isinstance(module, nn.ELU)
    assert module.alpha == 0.5
    assert module.inplace is True

    module = build_module(LeakyReLUOptions())
    assert isinstance(module, nn.LeakyReLU)
    assert module.negative_slope == 0.01

    module = build_module(HardshrinkOptions(0.3))
    assert isinstance(module, nn.Hardshrink)
    assert module.lambd == 0.3

    module = build_module(PReLUOptions(num_parameters=3, init=0.1))
    assert module.weight.shape == (3,)
    assert torch.allclose(module.weight, torch.full((3,), 0.1))


def test_threshold_module_forward():
    module = build_module(ThresholdOptions(0.5, -1.0))
    x = torch.tensor([0.0, 1.0])
    assert torch.equal(module(x), torch.tensor([-1.0, 1.0]))


def test_multihead_attention_module():
    module = build_module(MultiheadAttentionOptions(8, 2))
    assert isinstance(module, nn.MultiheadAttention)
    assert module.embed_dim == 8
    assert module.num_heads == 2
    assert module.kdim == 8

    module = build_module(MultiheadAttentionOptions(8, 2, kdim=4, vdim=6).set_bias(False))
    assert (module.kdim, module.vdim) == (4, 6)
    assert module.in_proj_bias is None


def test_pixel_shuffle_module():
    module = build_module(PixelShuffleOptions(2))
    assert module(torch.randn(1, 4, 3, 3)).shape == (1, 1, 6, 6)


def test_max_pool_module():
    module = build_module(MaxPool2dOptions(3).set_stride(2))
    assert isinstance(module, nn.MaxPool2d)
    assert module.kernel_size == (3, 3)
    assert module.stride == (2, 2)
    assert module(torch.randn(1, 1, 8, 8)).shape == (1, 1, 3, 3)


def test_avg_pool_modules():
    module = build_module(AvgPool2dOptions(2).set_divisor_override(1))
    assert isinstance(module, nn.AvgPool2d)
    assert module.divisor_override == 1
    x = torch.ones(1, 1, 4, 4)
    assert torch.allclose(module(x), torch.full((1, 1, 2, 2), 4.0))

    module = build_module(AvgPool1dOptions(2).set_divisor_override(1))
    assert isinstance(module, nn.AvgPool1d)
    assert torch.allclose(module(torch.ones(1, 1, 4)), torch.ones(1, 1, 2))


def test_adaptive_pool_module():
    module = build_module(AdaptiveAvgPool2dOptions([2, 3]))
    assert isinstance(module, nn.AdaptiveAvgPool2d)
    assert module(torch.randn(1, 1, 8, 9)).shape == (1, 1, 2, 3)


def test_fractional_max_pool_module():
    module = build_module(FractionalMaxPool2dOptions(2).set_output_size(3))
    assert isinstance(module, nn.FractionalMaxPool2d)
    assert module(torch.randn(1, 1, 8, 8)).shape == (1, 1, 3, 3)


def test_lp_pool_modules():
    module = build_module(LPPool1dOptions(2, 3))
    assert isinstance(module, nn.LPPool1d)
    assert module(torch.rand(1, 1, 9)).shape == (1, 1, 3)

    module = build_module(LPPool2dOptions(2, 2))
    assert isinstance(module, nn.LPPool2d)
    assert module(torch.rand(1, 1, 4, 4)).shape == (1, 1, 2, 2)


def test_max_unpool_module_and_functional():
    x = torch.randn(1, 1, 4, 4)
    pooled, indices = TF.max_pool2d(x, 2, return_indices=True)

    module = build_module(MaxUnpool2dOptions(2))
    assert isinstance(module, nn.MaxUnpool2d)
    assert module(pooled, indices).shape == x.shape

    out = call_functional(F.MaxUnpool2dFuncOptions(2), pooled, indices)
    assert out.shape == x.shape
    out = call_functional(F.MaxUnpool2dFuncOptions(2).set_output_size([5, 5]), pooled, indices)
    assert out.shape == (1, 1, 5, 5)


def test_softmax_functional_casts_dtype():
    x = torch.randn(2, 3)
    out = call_functional(F.SoftmaxFuncOptions(1).set_dtype(torch.float64), x)
    assert out.dtype is torch.float64
    assert torch.allclose(out.sum(dim=1), torch.ones(2, dtype=torch.float64))

    out = call_functional(F.LogSoftmaxFuncOptions(1), x)
    assert out.dtype is torch.float32
    assert torch.allclose(out, TF.log_softmax(x, dim=1))


def test_aliased_functional_uses_module_record():
    x = torch.randn(4, 4)
    out = call_functional(F.LeakyReLUFuncOptions().set_negative_slope(0.2), x)
    assert torch.allclose(out, TF.leaky_relu(x, 0.2))

    out = call_functional(F.MaxPool2dFuncOptions(2), torch.randn(1, 1, 4, 4))
    assert out.shape == (1, 1, 2, 2)


def test_rrelu_functional_eval_mode_is_deterministic():
    x = torch.randn(10)
    out = call_functional(F.RReLUFuncOptions(), x)
    assert torch.allclose(out, TF.rrelu(x, training=False))


def test_gumbel_softmax_functional_hard():
    logits = torch.randn(5, 4)
    out = call_functional(F.GumbelSoftmaxFuncOptions().set_hard(True), logits)
    assert out.shape == logits.shape
    assert torch.allclose(out.sum(dim=-1), torch.ones(5))
    assert torch.allclose(out.max(dim=-1).values, torch.ones(5))
    assert torch.equal((out > 0.5).sum(dim=-1), torch.ones(5, dtype=torch.long))


def test_multihead_attention_forward_matches_module():
    torch.manual_seed(0)
    mha = nn.MultiheadAttention(8, 2)
    mha.eval()
    opts = F.MultiheadAttentionForwardFuncOptions(
        8, 2, mha.in_proj_weight, mha.in_proj_bias, mha.bias_k, mha.bias_v,
        mha.add_zero_attn, 0.0, mha.out_proj.weight, mha.out_proj.bias,
    ).set_training(False)
    query = torch.randn(5, 3, 8)

    with torch.no_grad():
        expected, expected_weights = mha(query, query, query)
        out, weights = call_functional(opts, query, query, query)

    assert out.shape == (5, 3, 8)
    assert torch.allclose(out, expected, atol=1e-6)
    assert torch.allclose(weights, expected_weights, atol=1e-6)


def test_unsupported_records():
    with pytest.raises(UnsupportedOptionsError):
        build_module(F.GumbelSoftmaxFuncOptions())
    with pytest.raises(UnsupportedOptionsError):
        build_module(F.SoftmaxFuncOptions(1))
    with pytest.raises(UnsupportedOptionsError):
        call_functional(PReLUOptions(), torch.randn(3))
    with pytest.raises(TypeError):
        call_functional(MultiheadAttentionOptions(8, 2), torch.randn(3))
    with pytest.raises(UnsupportedOptionsError):
        build_module(object())


def test_lp_pool_after_stride_reset_to_none():
    module = build_module(LPPool1dOptions(2, 3).set_stride(None))
    assert module(torch.rand(1, 1, 9)).shape == (1, 1, 3)


def test_no_loop_variables_left_in_module():
    import nnoptions.builders as builders
    for name in ('_options', '_module', '_func'):
        assert not hasattr(builders, name)
