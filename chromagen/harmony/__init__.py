from .standard import HarmonyOptions, standard_harmony, harmony_hues
from .schemes import analogous, complementary, split_complementary, triad

__all__ = [
    "HarmonyOptions",
    "standard_harmony",
    "harmony_hues",
    "analogous",
    "complementary",
    "split_complementary",
    "triad",
]
