"""Tests for matcap slot bookkeeping and selection."""
import random

import pytest

from ripples.engine.library import MatcapLibrary
from ripples.engine.material import MatcapMaterial


class FakeTexture:
    def __init__(self, index):
        self.source = f"{index}.png"


class Recorder:
    def __init__(self):
        self.calls = []

    def __call__(self, *args):
        self.calls.append(args)


def make_library(count=7, default_index=5):
    material = MatcapMaterial()
    library = MatcapLibrary(count, material, default_index)
    return library, material


def test_all_loaded_fires_once_after_every_slot_resolves():
    library, _ = make_library()
    done = Recorder()
    library.on_all_loaded(done)
    order = list(range(7))
    random.Random(11).shuffle(order)
    for i in order[:-1]:
        library.texture_loaded(i, FakeTexture(i))
        assert done.calls == []
    library.texture_loaded(order[-1], FakeTexture(order[-1]))
    assert done.calls == [(library,)]
    assert library.is_complete


def test_failures_count_toward_completion():
    library, _ = make_library()
    done = Recorder()
    library.on_all_loaded(done)
    for i in range(6):
        library.texture_loaded(i, FakeTexture(i))
    library.texture_failed(6, "HTTP 404")
    assert len(done.calls) == 1
    assert library.failures == {6: "HTTP 404"}
    assert library.loaded_indices() == [0, 1, 2, 3, 4, 5]


def test_repeated_completion_is_ignored():
    library, _ = make_library(count=2)
    done = Recorder()
    library.on_all_loaded(done)
    first = FakeTexture(0)
    library.texture_loaded(0, first)
    library.texture_loaded(0, FakeTexture(0))
    library.texture_failed(0, "late")
    assert library.completed == 1
    assert library.texture(0) is first
    assert done.calls == []


def test_out_of_range_index_raises():
    library, _ = make_library()
    with pytest.raises(IndexError):
        library.texture_loaded(7, FakeTexture(7))
    with pytest.raises(IndexError):
        library.texture_failed(-1, "nope")


def test_negative_count_rejected():
    with pytest.raises(ValueError):
        MatcapLibrary(-1, MatcapMaterial())


def test_texture_added_listener_receives_index_and_texture():
    library, _ = make_library()
    added = Recorder()
    library.on_texture_added(added)
    texture = FakeTexture(2)
    library.texture_loaded(2, texture)
    library.texture_failed(3, "boom")
    assert added.calls == [(2, texture)]


@pytest.mark.parametrize("seed", [0, 1, 2, 3])
def test_default_activates_regardless_of_arrival_order(seed):
    library, material = make_library()
    order = list(range(7))
    random.Random(seed).shuffle(order)
    textures = {i: FakeTexture(i) for i in range(7)}
    for i in order:
        library.texture_loaded(i, textures[i])
        if 5 in library.textures:
            assert library.active_index == 5
        else:
            assert library.active_index is None
    assert material.matcap is textures[5]


def test_default_activates_even_when_it_arrives_first():
    library, material = make_library()
    texture = FakeTexture(5)
    library.texture_loaded(5, texture)
    assert library.active_index == 5
    assert material.matcap is texture
    assert not library.is_complete


def test_failed_default_leaves_nothing_active():
    library, material = make_library()
    library.texture_failed(5, "timeout")
    for i in (0, 1, 2, 3, 4, 6):
        library.texture_loaded(i, FakeTexture(i))
    assert library.active_index is None
    assert material.matcap is None


def test_click_moves_the_active_slot():
    library, material = make_library()
    changed = Recorder()
    library.on_active_changed(changed)
    textures = {i: FakeTexture(i) for i in range(7)}
    for i in range(7):
        library.texture_loaded(i, textures[i])
    library.activate(2)
    assert library.active_index == 2
    assert material.matcap is textures[2]
    assert changed.calls == [(None, 5), (5, 2)]


def test_reactivating_active_slot_does_not_notify():
    library, _ = make_library()
    changed = Recorder()
    library.on_active_changed(changed)
    library.texture_loaded(5, FakeTexture(5))
    library.activate(5)
    assert changed.calls == [(None, 5)]


def test_user_choice_survives_late_default():
    library, material = make_library()
    chosen = FakeTexture(1)
    library.texture_loaded(1, chosen)
    library.activate(1)
    library.texture_loaded(5, FakeTexture(5))
    assert library.active_index == 1
    assert material.matcap is chosen


def test_activating_unloaded_slot_raises():
    library, _ = make_library()
    library.texture_failed(3, "gone")
    with pytest.raises(ValueError):
        library.activate(3)
    with pytest.raises(ValueError):
        library.activate(4)
    assert library.active_index is None
