import pytest

from shared.config import GlobalConfig, PipelineConfig, ToolConfig


def test_defaults():
    config = ToolConfig()
    assert config.pipeline == PipelineConfig()
    assert config.pipeline.filler == "X"
    assert config.pipeline.wrap_width == 80
    assert config.global_settings.log_file == ""


def test_load_from_toml(tmp_path):
    path = tmp_path / "custom.toml"
    path.write_text(
        '[global]\nlog_level = "DEBUG"\nnot_a_setting = 1\n\n'
        "[pipeline]\nwrap_width = 60\nmax_key_dimension = 4\n",
        encoding="utf-8",
    )
    config = ToolConfig.load(path)
    assert config.global_settings == GlobalConfig(log_level="DEBUG")
    assert config.pipeline.wrap_width == 60
    assert config.pipeline.max_key_dimension == 4
    assert config.pipeline.filler == "X"


def test_explicit_missing_path_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        ToolConfig.load(tmp_path / "missing.toml")


def test_wrong_type_rejected(tmp_path):
    path = tmp_path / "bad.toml"
    path.write_text('[pipeline]\nwrap_width = "wide"\n', encoding="utf-8")
    with pytest.raises(TypeError, match="wrap_width"):
        ToolConfig.load(path)

    path.write_text("[global]\nlog_json = 1\n", encoding="utf-8")
    with pytest.raises(TypeError, match="log_json"):
        ToolConfig.load(path)


def test_default_path_loads():
    config = ToolConfig.load()
    assert isinstance(config.pipeline, PipelineConfig)


def test_to_dict():
    data = ToolConfig().to_dict()
    assert data["pipeline"]["matrix_indent"] == 3
    assert data["global_settings"]["log_json"] is False


def test_global_section_holds_logging_settings_only(tmp_path):
    path = tmp_path / "legacy.toml"
    path.write_text('[global]\noutput_dir = "reports"\nlog_json = true\n', encoding="utf-8")
    config = ToolConfig.load(path)
    assert config.global_settings == GlobalConfig(log_json=True)
    assert set(config.to_dict()["global_settings"]) == {"log_level", "log_file", "log_json"}
