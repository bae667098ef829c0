"""Basic chromagen usage examples.

Run directly with:
    python examples/basic_usage.py
"""
from chromagen import (
    HarmonyOptions,
    analogous,
    color_distance,
    complementary,
    gradient_rgb,
    hsb_to_rgb,
    random_rgb,
    rgb_to_hsb,
    split_complementary,
    triad,
    triad_mixing,
)


def demonstrate_conversions() -> None:
    # HSB in, RGB out, and back again.
    accent = hsb_to_rgb(0.08, 0.9, 0.95)
    print("HSB -> RGB:", accent)
    print("RGB -> HSB:", rgb_to_hsb(*accent))
    print("Distance to pure red:", color_distance(accent, (255, 0, 0)))


def demonstrate_gradients() -> None:
    # Same interval of the hue ring sampled four different ways.
    for strategy in ("UR", "G", "JG", "GR"):
        strip = gradient_rgb(6, 0.0, 0.5, strategy, bri=0.9, rng=1)
        print(f"{strategy:>2} gradient:", strip.tolist())


def demonstrate_harmonies() -> None:
    opts = HarmonyOptions(reference=0.6, sat=0.8, bri=0.9)
    print("Analogous:", analogous(5, 0.1, opts, rng=2).tolist())
    print("Complementary:", complementary(5, 0.05, 0.05, opts, rng=2).tolist())
    print("Split complementary:", split_complementary(5, 0.05, 0.05, 0.05, 0.1, opts, rng=2).tolist())
    print("Triad:", triad(6, 0.04, 0.04, 0.04, opts, rng=2).tolist())


def demonstrate_mixing() -> None:
    base = [random_rgb(rng=seed) for seed in (3, 4, 5)]
    print("Mix of", base, "->", triad_mixing(*base, grey_control=0.2, rng=6))


if __name__ == "__main__":
    demonstrate_conversions()
    demonstrate_gradients()
    demonstrate_harmonies()
    demonstrate_mixing()
