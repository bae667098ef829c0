from chromagen.utils import round_half_up, to_channel, wrap_hue, np_wrap_hue, resolve_rng, default_rng, seed, value_or_default
from chromagen import random_rgb
import threading
import numpy as np
import pytest


def test_round_half_up():
    assert round_half_up(2.5) == 3
    assert round_half_up(127.5) == 128
    assert round_half_up(2.49) == 2


def test_to_channel():
    assert to_channel(0.0) == 0
    assert to_channel(0.5) == 128
    assert to_channel(1.0) == 255


def test_wrap_hue():
    assert wrap_hue(1.25) == 0.25
    assert wrap_hue(-0.25) == 0.75
    assert wrap_hue(-1e-18) == 0.0
    assert np.allclose(np_wrap_hue([1.25, -0.25, 2.0]), [0.25, 0.75, 0.0])


def test_resolve_rng():
    gen = np.random.default_rng(0)
    assert resolve_rng(gen) is gen
    assert isinstance(resolve_rng(7), np.random.Generator)
    assert resolve_rng(None) is default_rng()


@pytest.mark.parametrize("bad", ["seed", 1.5, True])
def test_resolve_rng_rejects_other_types(bad):
    with pytest.raises(TypeError):
        resolve_rng(bad)


def test_seed_default_generator():
    seed(7)
    first = [random_rgb() for _ in range(5)]
    seed(7)
    assert [random_rgb() for _ in range(5)] == first


def test_default_generator_is_per_thread():
    generators = []
    thread = threading.Thread(target=lambda: generators.append(default_rng()))
    thread.start()
    thread.join()
    assert generators[0] is not default_rng()


def test_value_or_default():
    assert value_or_default(None, 3) == 3
    assert value_or_default(0, 3) == 0
    assert value_or_default("", "x") == ""
