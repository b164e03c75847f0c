import json
import pytest
from model.effect import EffectConfig, empty_effect, parse_parameters


def test_empty_effect_defaults():
    e = empty_effect("track", "B", "C")
    assert e.address == ("track", "B", "C")
    assert e.effect_type == "LPF"
    assert e.sw is True
    assert e.sw_mode == "TOGGLE"
    assert e.insert == "ALL"
    assert e.parameters == {}


def test_to_record_uses_wire_keys():
    e = EffectConfig("input", "A", "D", "REVERB", sw=False, sw_mode="MOMENT",
                     insert="MIC1", parameters={"REVERB_TIME": 2.5})
    record = e.to_record()
    assert record["fxGroup"] == "input"
    assert record["bank"] == "A"
    assert record["slot"] == "D"
    assert record["effectType"] == "REVERB"
    assert record["sw"] is False
    assert record["swMode"] == "MOMENT"
    assert record["insert"] == "MIC1"
    assert json.loads(record["parameters"]) == {"REVERB_TIME": 2.5}


def test_to_record_without_address():
    record = empty_effect("input", "A", "A").to_record(include_address=False)
    assert "fxGroup" not in record and "bank" not in record and "slot" not in record


def test_from_record_round_trip():
    e = EffectConfig("track", "C", "B", "DELAY", parameters={"DELAY_TIME": "notes4"})
    assert EffectConfig.from_record(e.to_record()) == e


def test_from_record_missing_address_defaults_to_a():
    e = EffectConfig.from_record({"effectType": "PHASER", "parameters": "{}"})
    assert e.address == ("input", "A", "A")


def test_from_record_explicit_address_wins():
    e = EffectConfig.from_record({"fxGroup": "input", "bank": "A"}, "track", "D", "D")
    assert e.address == ("track", "D", "D")


@pytest.mark.parametrize("raw", ["not json", "[1, 2]", "42", None, 17])
def test_bad_parameters_become_empty(raw):
    assert parse_parameters(raw) == {}


def test_parameters_accept_dict_and_string():
    assert parse_parameters({"A": 1}) == {"A": 1}
    assert parse_parameters('{"A": "notes1"}') == {"A": "notes1"}


def test_with_changes_returns_new_instance():
    e = empty_effect("input", "A", "A")
    changed = e.with_changes(effect_type="CHORUS")
    assert changed.effect_type == "CHORUS"
    assert e.effect_type == "LPF"


def test_from_record_null_fields_take_defaults():
    e = EffectConfig.from_record({"effectType": None, "sw": None, "swMode": None,
                                  "insert": None, "parameters": None})
    assert e.effect_type == "LPF"
    assert e.sw is True
    assert e.sw_mode == "TOGGLE"
    assert e.insert == "ALL"
    assert e.parameters == {}


def test_from_record_keeps_sw_off():
    assert EffectConfig.from_record({"sw": False}).sw is False


def test_effect_config_is_unhashable():
    e = empty_effect("input", "A", "A")
    assert e == empty_effect("input", "A", "A")
    with pytest.raises(TypeError):
        hash(e)
