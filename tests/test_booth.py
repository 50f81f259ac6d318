import io
import re
import threading

import pytest
from PIL import Image

from conftest import FakeRemover, make_subject
from poster import PosterStore, SelfieBooth
from poster.errors import IOFailure


def test_store_names_files_by_theme_and_timestamp(tmp_path):
    store = PosterStore(tmp_path, prefix="EVOLVE", clock=lambda: 1700000000.123)
    path = store.save(b"png", "artistic")

    assert path.name == "EVOLVE_artistic_1700000000123.png"
    assert path.read_bytes() == b"png"


def test_store_never_overwrites(tmp_path):
    store = PosterStore(tmp_path, clock=lambda: 1.0)
    first = store.save(b"one", "doctor")
    second = store.save(b"two", "doctor")

    assert first != second
    assert second.name == "EVOLVE_doctor_1001.png"
    assert first.read_bytes() == b"one"


def test_store_reports_unwritable_directory(tmp_path):
    blocker = tmp_path / "not-a-dir"
    blocker.write_text("file")
    store = PosterStore(blocker / "public")

    with pytest.raises(IOFailure):
        store.save(b"png", "doctor")


@pytest.mark.asyncio
async def test_process_writes_poster(booth, remover, public_dir):
    result = await booth.process(make_subject(), "artistic", filename="me.png")

    assert result.success
    assert result.error is None
    assert re.fullmatch(r"EVOLVE_artistic_\d+\.png", result.file_name)
    assert result.output_path.parent == public_dir
    assert remover.calls == ["me.png"]

    poster = Image.open(io.BytesIO(result.output_path.read_bytes()))
    assert poster.size == (1080, 1350)


@pytest.mark.asyncio
async def test_unknown_theme_still_succeeds(booth):
    result = await booth.process(make_subject(), "xyz")

    assert result.success
    assert result.theme == "xyz"
    assert result.file_name.startswith("EVOLVE_default_")


@pytest.mark.asyncio
async def test_removal_failure_is_explicit(composer, public_dir):
    booth = SelfieBooth(FakeRemover(fail_status=402), composer, PosterStore(public_dir))
    result = await booth.process(make_subject(), "professional")

    assert not result.success
    assert result.output_path is None
    assert result.error.error_type == "RemovalFailed"
    assert result.error.details["http_status"] == 402
    assert not public_dir.exists() or not any(public_dir.iterdir())


@pytest.mark.asyncio
async def test_undecodable_upload_skips_remote_call(booth, remover):
    result = await booth.process(b"not an image", "professional")

    assert not result.success
    assert result.error.error_type == "EncodingFailed"
    assert remover.calls == []


@pytest.mark.asyncio
async def test_missing_asset_is_a_failure(booth, assets_dir):
    (assets_dir / "bg_superhero.jpg").unlink()
    result = await booth.process(make_subject(), "superhero")

    assert not result.success
    assert result.error.error_type == "AssetMissing"
    assert result.error.code == 500


@pytest.mark.asyncio
async def test_oversized_upload_is_an_encoding_failure(booth, remover, monkeypatch):
    monkeypatch.setattr(Image, "MAX_IMAGE_PIXELS", 1000)

    result = await booth.process(make_subject(100, 100), "artistic")

    assert not result.success
    assert result.error.error_type == "EncodingFailed"
    assert result.error.code == 422
    assert remover.calls == []


@pytest.mark.asyncio
async def test_upload_is_decoded_off_the_event_loop(booth, monkeypatch):
    loop_thread = threading.get_ident()
    decode_threads = []
    original = booth.renderer.load_image

    def recording_load_image(data, label="image"):
        decode_threads.append(threading.get_ident())
        return original(data, label)

    monkeypatch.setattr(booth.renderer, "load_image", recording_load_image)

    result = await booth.process(make_subject(), "artistic")

    assert result.success
    assert decode_threads
    assert loop_thread not in decode_threads
