import asyncio
import importlib
import logging

import pytest
from PIL import Image

import config
import extract_channel
from sources import RemoteImageCache


ENTRYPOINTS = [
    "extract_channel",
]


@pytest.mark.parametrize("module_name", ENTRYPOINTS)
def test_entrypoint_help(module_name):
    module = importlib.import_module(module_name)
    assert hasattr(module, "main"), f"{module_name} missing main()"

    with pytest.raises(SystemExit) as excinfo:
        module.main(["--help"])

    assert excinfo.value.code == 0


class TestMain:
    """End-to-end runs of the extract_channel CLI on local files."""

    def test_writes_input_and_output(self, tmp_path, rgb_png_bytes):
        source = tmp_path / "in.png"
        source.write_bytes(rgb_png_bytes)
        out_dir = tmp_path / "data"

        code = extract_channel.main([str(source), "-o", str(out_dir), "-c", "2"])

        assert code == 0
        assert (out_dir / config.INPUT_IMAGE_NAME).read_bytes() == rgb_png_bytes
        output = Image.open(out_dir / config.OUTPUT_IMAGE_NAME)
        assert output.format == "JPEG"
        assert output.size == (5, 4)

    def test_missing_source_exits_1(self, tmp_path):
        code = extract_channel.main([str(tmp_path / "missing.jpg"), "-o", str(tmp_path)])
        assert code == 1

    def test_load_failure_logged_once(self, tmp_path, caplog):
        missing = tmp_path / "missing.jpg"
        with caplog.at_level(logging.DEBUG):
            extract_channel.main([str(missing), "-o", str(tmp_path)])

        errors = [r for r in caplog.records if r.levelno >= logging.ERROR]
        assert len(errors) == 1
        assert str(missing) in errors[0].getMessage()

    def test_channel_out_of_range_exits_1(self, tmp_path, rgb_png_bytes):
        source = tmp_path / "in.png"
        source.write_bytes(rgb_png_bytes)
        code = extract_channel.main([str(source), "-o", str(tmp_path), "-c", "3"])
        assert code == 1

    def test_not_an_image_exits_1(self, tmp_path):
        source = tmp_path / "in.jpg"
        source.write_bytes(b"nope")
        code = extract_channel.main([str(source), "-o", str(tmp_path)])
        assert code == 1


class TestRun:
    """Tests for extract_channel.run with a remote source."""

    def test_remote_source_uses_cache(self, tmp_path, cache_dir, make_fetcher, rgb_jpeg_bytes):
        fetcher = make_fetcher(data=rgb_jpeg_bytes)
        cache = RemoteImageCache(cache_dir, fetcher=fetcher)

        result = asyncio.run(
            extract_channel.run(
                "https://host/sample.jpg",
                output_dir=tmp_path / "data",
                cache=cache,
            )
        )

        assert result.saved is True
        assert result.output_path.exists()
        assert fetcher.calls == ["https://host/sample.jpg"]
        assert any(cache_dir.iterdir())

    def test_no_cache_leaves_cache_dir_alone(self, tmp_path, cache_dir, make_fetcher, rgb_jpeg_bytes):
        fetcher = make_fetcher(data=rgb_jpeg_bytes)
        cache = RemoteImageCache(cache_dir, fetcher=fetcher)

        asyncio.run(
            extract_channel.run(
                "https://host/sample.jpg",
                output_dir=tmp_path / "data",
                allow_cache=False,
                cache=cache,
            )
        )

        assert not cache_dir.exists()
