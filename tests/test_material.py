from ripples.engine.material import MatcapMaterial


class FakeTexture:
    source = "fake.png"


def test_starts_without_matcap():
    material = MatcapMaterial()
    assert material.matcap is None
    assert material.double_sided
    assert not material.needs_update


def test_set_matcap_flags_update():
    material = MatcapMaterial()
    texture = FakeTexture()
    material.set_matcap(texture)
    assert material.matcap is texture
    assert material.needs_update


def test_setting_same_texture_is_a_no_op():
    material = MatcapMaterial()
    texture = FakeTexture()
    material.set_matcap(texture)
    material.needs_update = False
    material.set_matcap(texture)
    assert not material.needs_update
