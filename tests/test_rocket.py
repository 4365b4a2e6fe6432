import pytest

from Hardware.rocket import RocketConfiguration, as_weight, format_weight, NO_STAGES_LINE, SEPARATOR_LINE


# --- Fixtures ---
@pytest.fixture
def empty_rocket():
    return RocketConfiguration()

@pytest.fixture
def mars_rocket():
    return RocketConfiguration(
        name="Mars Explorer V",
        stages=["Stage 1: Super Heavy Booster", "Stage 2: Interplanetary Transfer Stage"],
        engine_type="high-thrust liquid-propellant engines",
        payload="Scientific Rover & Life Support",
        total_weight=2700.0,
    )

# --- Defaults ---
def test_rocket_defaults_are_empty(empty_rocket):
    """A fresh configuration holds empty text fields and zero weight."""
    assert empty_rocket.name == ""
    assert empty_rocket.stages == []
    assert empty_rocket.engine_type == ""
    assert empty_rocket.payload == ""
    assert empty_rocket.total_weight == 0.0
    assert empty_rocket.is_empty()

def test_rocket_stage_lists_are_not_shared():
    a = RocketConfiguration()
    b = RocketConfiguration()
    a.stages.append("Booster")
    assert b.stages == []

def test_rocket_is_empty_false_after_any_field(empty_rocket):
    empty_rocket.total_weight = 1.0
    assert not empty_rocket.is_empty()

# --- Rendering ---
def test_summary_layout(mars_rocket):
    lines = mars_rocket.summary().splitlines()
    assert lines == [
        "--- Rocket Configuration: Mars Explorer V ---",
        " Engine type: high-thrust liquid-propellant engines",
        " Payload: Scientific Rover & Life Support",
        " Total weight: 2700 t",
        " Stages:",
        "   1. Stage 1: Super Heavy Booster",
        "   2. Stage 2: Interplanetary Transfer Stage",
        SEPARATOR_LINE,
    ]

def test_summary_placeholder_without_stages(empty_rocket):
    lines = empty_rocket.summary().splitlines()
    assert lines[4] == " Stages:"
    assert lines[5] == NO_STAGES_LINE
    assert lines[-1] == SEPARATOR_LINE

def test_summary_is_deterministic_and_matches_str(mars_rocket):
    assert mars_rocket.summary() == mars_rocket.summary()
    assert str(mars_rocket) == mars_rocket.summary()
    assert mars_rocket.summary().endswith("\n")

def test_format_weight():
    assert format_weight(2700.0) == "2700"
    assert format_weight(375) == "375"
    assert format_weight(12.5) == "12.5"
    assert format_weight(0.0) == "0"

def test_stage_count(mars_rocket, empty_rocket):
    assert mars_rocket.stage_count() == 2
    assert empty_rocket.stage_count() == 0

@pytest.mark.parametrize(
    "weight, expected",
    [
        (12345678.9012, "12345678.9012"),
        (1e10, "10000000000"),
        (123456789012.0, "123456789012"),
        (0.1 + 0.2, repr(0.1 + 0.2)),
    ],
)
def test_format_weight_keeps_full_precision(weight, expected):
    assert format_weight(weight) == expected
    assert float(format_weight(weight)) == weight

def test_summary_shows_exact_weight():
    rocket = RocketConfiguration(name="Heavy", total_weight=12345678.9012)
    assert " Total weight: 12345678.9012 t" in rocket.summary().splitlines()
    rocket.total_weight = 1e10
    assert " Total weight: 10000000000 t" in rocket.summary().splitlines()

# --- Weight validation ---
@pytest.mark.parametrize("weight, expected", [(0, 0.0), (12, 12.0), (2.5, 2.5)])
def test_as_weight_accepts_numbers(weight, expected):
    assert as_weight(weight) == expected
    assert isinstance(as_weight(weight), float)

@pytest.mark.parametrize(
    "bad_weight",
    ["10", b"10", True, False, None, object(), 10**400, -1.0, float("inf"), float("nan")],
)
def test_as_weight_rejects_with_value_error(bad_weight):
    with pytest.raises(ValueError):
        as_weight(bad_weight)
