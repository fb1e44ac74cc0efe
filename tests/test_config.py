import pytest

from gametree.config import EngineConfig
from gametree.exceptions import GameTreeError, InvalidConfigError


def test_defaults_are_valid():
    config = EngineConfig()
    config.validate()
    assert config.lookahead_plies == 2 * config.lookahead
    assert config.playout_plies == 2 * config.playout_length


@pytest.mark.parametrize(
    "field, value",
    [
        ("lookahead", 0),
        ("playouts", 0),
        ("playout_length", -3),
        ("lookahead", True),
        ("playouts", "20"),
        ("seed", 1.5),
    ],
)
def test_validate_rejects(field, value):
    config = EngineConfig(**{field: value})
    with pytest.raises(InvalidConfigError) as excinfo:
        config.validate()
    assert excinfo.value.field == field
    assert isinstance(excinfo.value, GameTreeError)
    assert isinstance(excinfo.value, ValueError)


def test_dict_round_trip():
    config = EngineConfig(lookahead=3, playouts=7, playout_length=4, seed=11)
    assert EngineConfig.from_dict(config.to_dict()) == config


def test_from_dict_ignores_unknown_keys_and_unwraps_section():
    config = EngineConfig.from_dict({"engine": {"lookahead": 4, "colour": "blue"}, "series": {"games": 3}})
    assert config == EngineConfig(lookahead=4)


def test_from_dict_validates():
    with pytest.raises(InvalidConfigError):
        EngineConfig.from_dict({"playouts": 0})


def test_from_yaml(tmp_path):
    path = tmp_path / "engine.yaml"
    path.write_text("lookahead: 1\nplayouts: 50\nplayout_length: 3\nseed: 4\n")

    assert EngineConfig.from_yaml(path) == EngineConfig(lookahead=1, playouts=50, playout_length=3, seed=4)


def test_from_yaml_empty_file_uses_defaults(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("")

    assert EngineConfig.from_yaml(path) == EngineConfig()


def test_from_yaml_rejects_non_mapping(tmp_path):
    path = tmp_path / "list.yaml"
    path.write_text("- 1\n- 2\n")

    with pytest.raises(InvalidConfigError):
        EngineConfig.from_yaml(str(path))
