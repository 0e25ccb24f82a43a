import pytest

from nnoptions import PixelShuffleOptions, functional as F


def test_upscale_factor_is_required():
    assert PixelShuffleOptions(5).upscale_factor == 5
    with pytest.raises(TypeError):
        PixelShuffleOptions()


def test_setter():
    assert PixelShuffleOptions(2).set_upscale_factor(3).upscale_factor == 3


def test_functional_alias():
    assert F.PixelShuffleFuncOptions is PixelShuffleOptions
