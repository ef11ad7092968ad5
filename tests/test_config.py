from argparse import Namespace

import pytest
import yaml

from polyface import INSTANCE_PREDICATE, InterfaceRegistry, InvalidArgumentError
from polyface.config import (
    InterfaceConfig,
    build_registry,
    config_to_yaml,
    load_config,
    merge_cli_args,
)


def _write(tmp_path, text):
    path = tmp_path / "interface.yaml"
    path.write_text(text)
    return path


def test_load_config(tmp_path):
    path = _write(tmp_path, (
        "name: Person\n"
        "methods: [talk, walk, getFullName, talk]\n"
        "log_level: debug\n"
        "unknown_key: ignored\n"
    ))
    config = load_config(path)
    assert config.name == "Person"
    assert config.methods == ["talk", "walk", "getFullName"]
    assert config.log_level == "DEBUG"
    assert config.log_file is None


def test_load_empty_file(tmp_path):
    config = load_config(_write(tmp_path, ""))
    assert config == InterfaceConfig()


def test_reserved_name_is_not_kept(tmp_path):
    config = load_config(_write(tmp_path, f"methods: [talk, {INSTANCE_PREDICATE}]\n"))
    assert config.methods == ["talk"]


@pytest.mark.parametrize("text", [
    "methods: talk\n",
    "methods: [talk, 3]\n",
    "methods: {talk: 1}\n",
    "- talk\n- walk\n",
    "methods: [talk]\nlog_level: chatty\n",
])
def test_invalid_declarations(tmp_path, text):
    with pytest.raises(InvalidArgumentError):
        load_config(_write(tmp_path, text))


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "nope.yaml")


def test_merge_cli_args_overrides():
    config = InterfaceConfig(name="Person", methods=["talk"])
    args = Namespace(name=None, methods=["walk", "walk"], log_level="INFO", log_file=None)
    merge_cli_args(config, args)
    assert config.name == "Person"
    assert config.methods == ["walk"]
    assert config.log_level == "INFO"


def test_config_to_yaml_round_trip(tmp_path):
    config = InterfaceConfig(name="Person", methods=["talk", "walk"], log_file="p.log")
    text = config_to_yaml(config)
    assert yaml.safe_load(text) == {
        "name": "Person",
        "methods": ["talk", "walk"],
        "log_level": "WARNING",
        "log_file": "p.log",
    }
    assert load_config(_write(tmp_path, text)) == config


def test_build_registry():
    registry = build_registry(InterfaceConfig(name="Person", methods=["talk", "walk"]))
    assert isinstance(registry, InterfaceRegistry)
    assert registry.name == "Person"
    assert registry.interfaces == frozenset({"talk", "walk", INSTANCE_PREDICATE})


def test_build_registry_without_name():
    assert build_registry(InterfaceConfig(methods=["talk"])).name is None
