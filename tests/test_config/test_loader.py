import pytest

from cmdopts import CmdParse
from cmdopts.config import OptionsConfig, RawOption, find_config, loader
from cmdopts.exceptions import ConfigError

YAML_CONFIG = """
options:
  - name: BufferSize
    default: 1000
    short: b
    help: Size of the read buffer
  - name: OutputFile
    default: output.txt
    short: o
  - long_name: Verbose
    default_value: false
"""

TOML_CONFIG = """
[[options]]
name = "BufferSize"
default = "1000"
short = "b"

[[options]]
name = "OutputFile"
default = "output.txt"
short = "o"
"""


def test_load_yaml(tmp_path):
    path = tmp_path / "cmdopts.yaml"
    path.write_text(YAML_CONFIG, encoding="UTF-8")

    cmd = loader(path)

    assert isinstance(cmd, CmdParse)
    assert cmd.get_param_option_count() == 3
    buffer_size = cmd.get_param_option("buffersize")
    assert buffer_size.default_value == "1000"
    assert buffer_size.short_name == "b"
    assert buffer_size.help == "Size of the read buffer"
    assert cmd.get_param_option("Verbose").default_value == "false"
    assert cmd.get_param_option("Verbose").short_name == "Verbose"
    assert not cmd.has_errors()

    assert cmd.init(3, ["app", "-b:23", "--Verbose"]) is True
    assert cmd.get_value("BufferSize", int) == 23
    assert cmd.get_value("Verbose", bool) is False


def test_load_toml(tmp_path):
    path = tmp_path / "cmdopts.toml"
    path.write_text(TOML_CONFIG, encoding="UTF-8")

    cmd = loader(str(path))

    assert cmd.get_param_option_count() == 2
    assert cmd.init(2, ["app", '--OutputFile="C://Temp//"']) is True
    assert cmd.get_value("OutputFile") == "C://Temp//"


def test_load_records_duplicates(tmp_path):
    path = tmp_path / "dupes.yaml"
    path.write_text(
        "options:\n  - name: Level\n  - name: LEVEL\n", encoding="UTF-8"
    )
    cmd = loader(path)
    assert cmd.get_param_option_count() == 1
    assert cmd.get_errors() == ["Option already exists: LEVEL"]


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        loader(tmp_path / "missing.yaml")


def test_bad_path_type():
    with pytest.raises(TypeError):
        loader(42)


def test_unsupported_suffix(tmp_path):
    path = tmp_path / "cmdopts.json"
    path.write_text("{}", encoding="UTF-8")
    with pytest.raises(ConfigError) as excinfo:
        loader(path)
    assert "Unsupported config format" in str(excinfo.value)


def test_not_a_dictionary(tmp_path):
    path = tmp_path / "cmdopts.yaml"
    path.write_text("- just\n- a list\n", encoding="UTF-8")
    with pytest.raises(ConfigError):
        loader(path)


def test_malformed_yaml(tmp_path):
    path = tmp_path / "cmdopts.yaml"
    path.write_text("options: [unclosed\n", encoding="UTF-8")
    with pytest.raises(ConfigError):
        loader(path)


@pytest.mark.parametrize(
    "content",
    [
        "options:\n  - default: 1\n",
        "options:\n  - name: ''\n",
        "options:\n  - name: --BufferSize\n",
        "options:\n  - name: Level\n    colour: red\n",
        "options:\n  - name: Level\n    default: [1, 2]\n",
    ],
)
def test_invalid_declarations(tmp_path, content):
    path = tmp_path / "cmdopts.yaml"
    path.write_text(content, encoding="UTF-8")
    with pytest.raises(ConfigError):
        loader(path)


def test_raw_option_to_option():
    option = RawOption(name="Level", default=3, short=" l ").to_option()
    assert option.long_name == "Level"
    assert option.default_value == "3"
    assert option.short_name == "l"


def test_options_config_to_parser():
    config = OptionsConfig.model_validate({"options": [{"name": "a"}, {"name": "b"}]})
    assert config.to_parser().get_param_option_count() == 2


def test_find_config_in_cwd(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    monkeypatch.delenv("CMDOPTS_CONFIG", raising=False)
    assert find_config() is None

    path = tmp_path / "cmdopts.toml"
    path.write_text(TOML_CONFIG, encoding="UTF-8")
    assert find_config().resolve() == path.resolve()


def test_find_config_from_environment(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    path = tmp_path / "elsewhere" / "options.yaml"
    path.parent.mkdir()
    path.write_text(YAML_CONFIG, encoding="UTF-8")
    monkeypatch.setenv("CMDOPTS_CONFIG", str(path))
    assert find_config().resolve() == path.resolve()
