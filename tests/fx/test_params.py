"""Tests for parameter configs and the registry (fx/params.py)."""
import pytest
from fx.params import (
    COMBINED, RANGE, SELECT, TEXT, PARAMETER_CONFIGS, ParameterConfig,
    ParameterRegistry, create_combined_parameter, range_parameter,
    select_parameter, text_parameter,
)
from fx.values import MUSICAL_NOTE_VALUES, NoteToken, Numeric


@pytest.fixture
def registry():
    return ParameterRegistry()


def test_names_are_unique():
    names = [c.name for c in PARAMETER_CONFIGS]
    assert len(set(names)) == len(names)


def test_resolve_known_name(registry):
    config = registry.resolve("TRANSPOSE_TRANS")
    assert config.kind == RANGE
    assert (config.min_val, config.max_val, config.default) == (-12, 12, 0)


def test_resolve_unknown_name_falls_back_to_generic(registry):
    config = registry.resolve("CHORUS_RATE")
    assert config.name == "CHORUS_RATE"
    assert config.kind == RANGE
    assert (config.min_val, config.max_val, config.step, config.default) == (0, 100, 1, 50)
    assert "CHORUS_RATE" not in registry
    assert registry.get("CHORUS_RATE") is None


def test_registry_is_injectable():
    custom = ParameterRegistry([range_parameter("FOO_BAR", 0, 10, 3)])
    assert len(custom) == 1
    assert custom.resolve("FOO_BAR").default == 3
    assert custom.names() == ["FOO_BAR"]


@pytest.mark.parametrize("config", PARAMETER_CONFIGS, ids=lambda c: c.name)
def test_every_config_is_well_formed(config):
    assert config.default is not None
    if config.kind in (RANGE, COMBINED):
        assert config.min_val <= config.max_val
        assert config.step > 0
    if config.kind == RANGE:
        assert config.min_val <= config.default <= config.max_val
    if config.kind in (SELECT, COMBINED):
        assert config.option_values()
    if config.kind == SELECT:
        assert config.default in config.option_values()


def test_combined_parameter_shape():
    config = create_combined_parameter("LPF_RATE")
    assert config.kind == COMBINED
    assert (config.min_val, config.max_val, config.step) == (0, 100, 1)
    assert config.default == "notes1"
    assert config.option_values() == list(MUSICAL_NOTE_VALUES)


def test_combined_without_images_uses_plain_tokens():
    config = create_combined_parameter("X_RATE", "1MEAS", use_image_notes=False)
    assert config.options == MUSICAL_NOTE_VALUES
    assert not config.use_image_notes


def test_autoriff_tempo_default_is_a_legal_token(registry):
    config = registry.resolve("AUTORIFF_TEMPO")
    assert config.default in config.option_values()


@pytest.mark.parametrize("name, expected", [
    ("LPF_RATE", "RATE"),
    ("LPF_STEP_RATE", "STEP RATE"),
    ("SEQ_SW", "SW"),
    ("SEQ_VAL12", "VAL 12"),
    ("STEPSLICER_STEP_LEN3", "LEN 3"),
    ("STEPSLICER_STEP_LVL16", "LVL 16"),
    ("HRMAUTO_D_LEVEL", "D LEVEL"),
])
def test_display_name(name, expected):
    assert range_parameter(name, 0, 100, 0).display_name == expected


def test_text_parameter_displays_its_label():
    header = text_parameter("STEP_LENGTH_HEADER", "STEP LENGTH (1-16)")
    assert header.kind == TEXT
    assert header.display_name == "STEP LENGTH (1-16)"


# -- decode / encode --------------------------------------------------------

def test_combined_decode_token_and_number():
    config = create_combined_parameter("LPF_RATE")
    assert config.decode("notes4") == NoteToken("notes4")
    assert config.decode(40) == Numeric(40)
    assert config.decode("40") == Numeric(40)
    assert config.decode(250) == Numeric(100)


def test_combined_decode_garbage_falls_back_to_default():
    config = create_combined_parameter("LPF_RATE")
    assert config.decode("not a note") == NoteToken("notes1")
    assert config.decode(None) == NoteToken("notes1")


def test_combined_encode_is_inverse_of_decode():
    config = create_combined_parameter("LPF_RATE")
    assert config.encode(config.decode("2MEAS")) == "2MEAS"
    assert config.encode(config.decode(75)) == 75


def test_range_decode_clamps_and_keeps_default_for_garbage():
    config = range_parameter("TRANSPOSE_TRANS", -12, 12, 0)
    assert config.decode(-20) == -12
    assert config.decode("5") == 5
    assert config.decode("x") == 0
    assert config.decode(True) == 0


def test_select_decode():
    config = select_parameter("RINGMOD_MODE", ("1", "2"), "2")
    assert config.decode("1") == "1"
    assert config.decode(1) == "1"
    assert config.decode("3") == "2"


def test_text_decode_returns_label():
    header = text_parameter("H", "HEADER")
    assert header.decode("anything") == "HEADER"


def test_format_value_units():
    assert range_parameter("REVERB_PRE_DELAY", 0, 500, 50, 10).format_value(120) == "120ms"
    assert range_parameter("SYNTH_FREQUENCY", 0, 100, 50).format_value(20) == "20Hz"
    assert create_combined_parameter("LPF_RATE").format_value("notes2") == "notes2"


def test_clamp_keeps_fractional_steps():
    config = range_parameter("REVERB_TIME", 0.1, 10, 3.2, step=0.1)
    assert config.clamp(2.5) == 2.5
    assert config.clamp(20.0) == 10


def test_parameter_config_is_frozen():
    config = range_parameter("A_B", 0, 1, 0)
    with pytest.raises(AttributeError):
        config.default = 1  # type: ignore[misc]
    assert isinstance(config, ParameterConfig)
