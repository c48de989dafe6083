"""Tests for config_loader module."""

from __future__ import annotations

import pytest
import yaml


def test_load_settings(tmp_path):
    from blockprint.pipeline.config_loader import load_settings
    from blockprint.utils.logging import setup_logging

    setup_logging(verbose=False)

    config_path = tmp_path / "blockprint.yaml"
    config_path.write_text(yaml.dump({"chunker": {"block_size": 4}, "workers": 3}))

    settings = load_settings(config_path)
    assert settings.block_size == 4
    assert settings.workers == 3


def test_load_settings_defaults(tmp_path):
    from blockprint.config import DEFAULT_BLOCK_SIZE, DEFAULT_WORKERS
    from blockprint.pipeline.config_loader import load_settings

    config_path = tmp_path / "blockprint.yaml"
    config_path.write_text("")

    settings = load_settings(config_path)
    assert settings.block_size == DEFAULT_BLOCK_SIZE
    assert settings.workers == DEFAULT_WORKERS


def test_load_settings_partial(tmp_path):
    from blockprint.config import DEFAULT_BLOCK_SIZE
    from blockprint.pipeline.config_loader import load_settings

    config_path = tmp_path / "blockprint.yaml"
    config_path.write_text(yaml.dump({"workers": 8}))

    settings = load_settings(config_path)
    assert settings.block_size == DEFAULT_BLOCK_SIZE
    assert settings.workers == 8


def test_load_settings_missing_file(tmp_path):
    from blockprint.pipeline.config_loader import load_settings

    with pytest.raises(FileNotFoundError, match="Config file not found"):
        load_settings(tmp_path / "nope.yaml")


@pytest.mark.parametrize(
    "config, match",
    [
        ({"chunker": {"block_size": 0}}, "chunker.block_size"),
        ({"chunker": {"block_size": "ten"}}, "must be an integer"),
        ({"chunker": {"block_size": True}}, "must be an integer"),
        ({"workers": -1}, "workers"),
        ({"chunker": [1, 2]}, "'chunker' must be a mapping"),
        ({"block_size": 3}, "unknown keys"),
    ],
)
def test_load_settings_invalid(tmp_path, config, match):
    from blockprint.pipeline.config_loader import load_settings

    config_path = tmp_path / "blockprint.yaml"
    config_path.write_text(yaml.dump(config))

    with pytest.raises(ValueError, match=match):
        load_settings(config_path)


def test_load_settings_not_a_mapping(tmp_path):
    from blockprint.pipeline.config_loader import load_settings

    config_path = tmp_path / "blockprint.yaml"
    config_path.write_text(yaml.dump([1, 2, 3]))

    with pytest.raises(ValueError, match="must contain a mapping"):
        load_settings(config_path)
