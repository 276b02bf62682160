"""
Unit tests for user configuration loading.
"""
from video_tools.config.common import load_user_config


def test_missing_file_gives_empty_config(tmp_path):
    assert load_user_config(tmp_path / "config.user.yaml") == {}


def test_reads_yaml(tmp_path):
    config_path = tmp_path / "config.user.yaml"
    config_path.write_text("paths:\n  ffmpeg_dir: /opt/ffmpeg\nengine:\n  timeout: 30\n", encoding="utf-8")
    assert load_user_config(config_path) == {
        "paths": {"ffmpeg_dir": "/opt/ffmpeg"},
        "engine": {"timeout": 30},
    }


def test_malformed_yaml_gives_empty_config(tmp_path):
    config_path = tmp_path / "config.user.yaml"
    config_path.write_text("paths: [unclosed", encoding="utf-8")
    assert load_user_config(config_path) == {}


def test_non_mapping_yaml_gives_empty_config(tmp_path):
    config_path = tmp_path / "config.user.yaml"
    config_path.write_text("- just\n- a list\n", encoding="utf-8")
    assert load_user_config(config_path) == {}
