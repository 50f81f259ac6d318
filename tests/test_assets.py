import pytest
from PIL import Image

from poster import AssetStore
from poster.errors import AssetMissing


def test_reads_bundled_asset(asset_store, assets_dir):
    assert asset_store.exists("blue.png")
    assert asset_store.get_asset("blue.png") == (assets_dir / "blue.png").read_bytes()
    assert asset_store.open_image("blue.png").mode == "RGBA"


def test_unknown_asset_is_missing(asset_store):
    assert not asset_store.exists("nope.png")
    with pytest.raises(AssetMissing):
        asset_store.get_asset("nope.png")


@pytest.mark.parametrize("name", ["../secret.png", "sub/../../secret.png"])
def test_names_outside_assets_dir_are_missing(tmp_path, name):
    assets_dir = tmp_path / "assets"
    assets_dir.mkdir()
    Image.new("RGB", (4, 4), "red").save(tmp_path / "secret.png")

    store = AssetStore(assets_dir)

    assert (tmp_path / "secret.png").is_file()
    assert not store.exists(name)
    with pytest.raises(AssetMissing):
        store.get_asset(name)


def test_absolute_paths_are_missing(tmp_path):
    outside = tmp_path / "secret.png"
    Image.new("RGB", (4, 4), "red").save(outside)
    store = AssetStore(tmp_path / "assets")

    assert not store.exists(str(outside))
    with pytest.raises(AssetMissing):
        store.get_asset(str(outside))
