import pytest

from boojo import configuration
from boojo.initialize import initialize
from boojo.repository.configuration import ConfigurationRepository
from boojo.repository.log_file import LogFileRepository, UnknownLogCategoryError


def test_defaults_without_config_file(data_dir):
    config = ConfigurationRepository().get_config()

    assert config == {
        "data_path": None,
        "default_log": "daily",
        "show_header": True,
    }


def test_missing_keys_are_filled_in(data_dir):
    configuration.APP_CONFIG_PATH.write_text("default_log: future\n")

    config = ConfigurationRepository().get_config()

    assert config["default_log"] == "future"
    assert config["show_header"] is True
    assert config["data_path"] is None


def test_update_and_flush(data_dir):
    repository = ConfigurationRepository()
    repository.update_config(default_log="monthly", show_header=False)
    repository.flush()

    config = ConfigurationRepository().get_config()

    assert config["default_log"] == "monthly"
    assert config["show_header"] is False


def test_update_rejects_unknown_log(data_dir):
    with pytest.raises(ValueError):
        ConfigurationRepository().update_config(default_log="weekly")


def test_data_path_setting(data_dir, tmp_path):
    custom = tmp_path / "elsewhere"
    configuration.APP_CONFIG_PATH.write_text(f"data_path: {custom}\n")

    configuration.load_data_path_configuration()

    assert configuration.DATA_PATH == custom


def test_initialize_creates_files(data_dir):
    initialize()

    assert configuration.APP_CONFIG_PATH.is_file()
    for category in configuration.LOG_CATEGORIES:
        assert (data_dir / f"{category}.txt").is_file()


def test_log_paths(data_dir):
    repository = LogFileRepository()

    assert repository.get_log_path("monthly") == data_dir / "monthly.txt"
    with pytest.raises(UnknownLogCategoryError) as error:
        repository.get_log_path("weekly")
    assert "weekly" in str(error.value)
    assert isinstance(error.value, ValueError)


def test_read_log(data_dir):
    (data_dir / "daily.txt").write_text(". Üben\n", encoding="utf-8")

    assert LogFileRepository().read_log("daily") == ". Üben\n"


def test_read_missing_log(data_dir):
    with pytest.raises(OSError):
        LogFileRepository().read_log("future")


@pytest.mark.parametrize("content", ["just a string\n", "- daily\n- monthly\n", "42\n"])
def test_config_without_mapping_uses_defaults(data_dir, content):
    configuration.APP_CONFIG_PATH.write_text(content)

    configuration.load_data_path_configuration()
    config = ConfigurationRepository().get_config()

    assert configuration.DATA_PATH == data_dir
    assert config == configuration.get_default_configuration()


def test_read_log_replaces_invalid_bytes(data_dir):
    (data_dir / "daily.txt").write_bytes(b". caf\xe9\n")

    assert LogFileRepository().read_log("daily") == ". caf�\n"
