"""Tests for .envload.toml config loading."""

from __future__ import annotations

import pytest

from envload.config import CONFIG_FILENAME, EnvloadConfig, find_config_file, load_config
from envload.options import LoadOptions
from envload.policy import ClobberPolicy


def test_load_config_defaults_without_section(tmp_path):
    p = tmp_path / CONFIG_FILENAME
    p.write_text("[other]\nx = 1\n")
    cfg = load_config(p)
    assert cfg.path == ".env"
    assert cfg.traverse is False
    assert cfg.clobber is ClobberPolicy.CLOBBER
    assert cfg.include_env is True
    assert cfg.config_path == p


def test_load_config_values(tmp_path):
    p = tmp_path / CONFIG_FILENAME
    p.write_text(
        '[envload]\npath = "config/.env.local"\ntraverse = true\n'
        'clobber = "no_clobber"\ninclude_env = false\n'
    )
    cfg = load_config(p)
    assert cfg.path == "config/.env.local"
    assert cfg.traverse is True
    assert cfg.clobber is ClobberPolicy.NO_CLOBBER
    assert cfg.include_env is False


def test_load_config_rejects_non_bool(tmp_path):
    p = tmp_path / CONFIG_FILENAME
    p.write_text('[envload]\ntraverse = "yes"\n')
    with pytest.raises(ValueError, match="envload.traverse"):
        load_config(p)


def test_load_config_rejects_unknown_policy(tmp_path):
    p = tmp_path / CONFIG_FILENAME
    p.write_text('[envload]\nclobber = "maybe"\n')
    with pytest.raises(ValueError):
        load_config(p)


def test_find_config_file_walks_up(tmp_path):
    p = tmp_path / CONFIG_FILENAME
    p.write_text("[envload]\n")
    child = tmp_path / "a" / "b"
    child.mkdir(parents=True)
    assert find_config_file(child) == p.resolve()


def test_with_environ():
    cfg = EnvloadConfig().with_environ({"ENVLOAD_PATH": "x.env", "ENVLOAD_CLOBBER": "NO-CLOBBER"})
    assert cfg.path == "x.env"
    assert cfg.clobber is ClobberPolicy.NO_CLOBBER


def test_with_environ_ignores_empty_values():
    cfg = EnvloadConfig(path="keep.env").with_environ({"ENVLOAD_PATH": "", "ENVLOAD_CLOBBER": ""})
    assert cfg.path == "keep.env"
    assert cfg.clobber is ClobberPolicy.CLOBBER


def test_load_options_from_config():
    cfg = EnvloadConfig(traverse=True, clobber=ClobberPolicy.NO_CLOBBER, include_env=False)
    opts = LoadOptions.from_config(cfg)
    assert opts == LoadOptions(
        clobber=ClobberPolicy.NO_CLOBBER, only_exact_path=False, include_env_vars=False
    )


def test_load_options_chain():
    opts = LoadOptions().no_env_vars().no_clobber().traverse_path().exclude_env_vars()
    assert opts.set_env_vars is False
    assert opts.clobber is ClobberPolicy.NO_CLOBBER
    assert opts.only_exact_path is False
    assert opts.include_env_vars is False
    # Copies, not mutations.
    assert LoadOptions().set_env_vars is True


@pytest.mark.parametrize(
    "body, setting",
    [
        ("clobber = 1\n", "envload.clobber"),
        ("path = 1\n", "envload.path"),
        ('path = ["a.env"]\n', "envload.path"),
    ],
)
def test_load_config_rejects_non_string(tmp_path, body, setting):
    p = tmp_path / CONFIG_FILENAME
    p.write_text("[envload]\n" + body)
    with pytest.raises(ValueError, match=setting):
        load_config(p)


def test_load_config_rejects_non_table_section(tmp_path):
    p = tmp_path / CONFIG_FILENAME
    p.write_text('envload = "clobber"\n')
    with pytest.raises(ValueError, match="must be a table"):
        load_config(p)
