from .dimension import get_dimension
from .num_utils import round_precise, round_half_up
from .hex import hex_to_rgb, rgb_to_hex
from .rng import get_rng

__all__ = [
    'get_dimension',
    'round_precise',
    'round_half_up',
    'hex_to_rgb',
    'rgb_to_hex',
    'get_rng',
]
