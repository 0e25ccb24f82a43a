"""
pixelshuffle.py — Option record for the pixel shuffle module
"""

from .arg import options, arg


@options
class PixelShuffleOptions:
    """Options for the ``PixelShuffle`` module.

    Attributes
    ----------
    upscale_factor : int
        Factor to increase spatial resolution by. Required.

    Examples
    --------
    >>> PixelShuffleOptions(5).upscale_factor
    5
    """
    upscale_factor: int = arg()
