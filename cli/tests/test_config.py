from upnotes_cli import config


def _use_tmp_config_dir(tmp_path, monkeypatch) -> None:
    def _config_dir(_: str) -> str:
        return str(tmp_path)

    monkeypatch.setattr(config, "user_config_dir", _config_dir)


def test_load_config_defaults_when_missing(tmp_path, monkeypatch) -> None:
    _use_tmp_config_dir(tmp_path, monkeypatch)
    cfg = config.load_config()
    assert cfg == config.default_config()
    assert cfg.check_updates is True


def test_save_and_load_round_trip(tmp_path, monkeypatch) -> None:
    _use_tmp_config_dir(tmp_path, monkeypatch)
    cfg = config.default_config()
    cfg.package_name = "acme-cli"
    cfg.changelog_url = "https://acme.test/CHANGELOG.md"
    cfg.check_updates = False

    path = config.save_config(cfg)
    contents = tmp_path.joinpath("config.toml").read_text(encoding="utf-8")

    assert path.endswith("config.toml")
    assert 'package_name = "acme-cli"' in contents
    assert "update_command" not in contents
    assert config.load_config() == cfg


def test_from_toml_ignores_malformed_values() -> None:
    cfg = config.from_toml(
        {
            "package_name": "  ",
            "check_updates": "yes",
            "timeout_s": -3,
            "update_command": ["pipx", 5],
        }
    )
    assert cfg == config.default_config()


def test_from_toml_reads_update_command() -> None:
    cfg = config.from_toml({"package_name": "acme-cli", "update_command": ["pipx", "upgrade", "acme-cli"]})
    assert config.effective_update_command(cfg) == ["pipx", "upgrade", "acme-cli"]


def test_default_update_command_uses_pip() -> None:
    cfg = config.from_toml({"package_name": "acme-cli"})
    command = config.effective_update_command(cfg)
    assert command[1:] == ["-m", "pip", "install", "--upgrade", "acme-cli"]


def test_malformed_config_file_falls_back_to_defaults(tmp_path, monkeypatch) -> None:
    _use_tmp_config_dir(tmp_path, monkeypatch)
    tmp_path.joinpath("config.toml").write_text("package_name = ", encoding="utf-8")
    assert config.load_config() == config.default_config()


def test_resolve_urls_env_override(monkeypatch) -> None:
    cfg = config.default_config()
    monkeypatch.setenv(config.ENV_PACKAGE_URL, "http://127.0.0.1:8030/package.json")
    monkeypatch.setenv(config.ENV_CHANGELOG_URL, "http://127.0.0.1:8030/CHANGELOG.md")
    assert config.resolve_package_url(cfg) == "http://127.0.0.1:8030/package.json"
    assert config.resolve_changelog_url(cfg) == "http://127.0.0.1:8030/CHANGELOG.md"


def test_resolve_urls_from_config(monkeypatch) -> None:
    cfg = config.default_config()
    cfg.changelog_url = "https://acme.test/CHANGELOG.md"
    monkeypatch.delenv(config.ENV_CHANGELOG_URL, raising=False)
    assert config.resolve_changelog_url(cfg) == "https://acme.test/CHANGELOG.md"


def test_update_check_disabled_by_env(monkeypatch) -> None:
    cfg = config.default_config()
    monkeypatch.setenv(config.ENV_NO_UPDATE_CHECK, "1")
    assert not config.update_check_enabled(cfg)
    monkeypatch.delenv(config.ENV_NO_UPDATE_CHECK)
    assert config.update_check_enabled(cfg)
    cfg.check_updates = False
    assert not config.update_check_enabled(cfg)
