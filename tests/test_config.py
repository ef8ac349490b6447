from kantodex import config


def test_coerce_int_falls_back_on_bad_values():
    assert config._coerce_int(None, 999) == 999
    assert config._coerce_int("151", 999) == 151
    assert config._coerce_int("  ", 999) == 999
    assert config._coerce_int("many", 999) == 999
    assert config._coerce_int("-5", 999) == 999


def test_coerce_float_accepts_seconds_suffix():
    assert config._coerce_float("12.5s", 30.0) == 12.5
    assert config._coerce_float("", 30.0) == 30.0
    assert config._coerce_float("soon", 30.0) == 30.0


def test_coerce_bool():
    assert config._coerce_bool("0", True) is False
    assert config._coerce_bool("yes", False) is True
    assert config._coerce_bool("maybe", True) is True
    assert config._coerce_bool(None, False) is False


def test_base_url_is_normalized():
    assert config._normalize_base_url("https://pokeapi.co/api/v2/") == "https://pokeapi.co/api/v2"
    assert config._normalize_base_url("  ") == config.DEFAULT_POKEAPI_BASE_URL
    assert config._normalize_base_url(None) == config.DEFAULT_POKEAPI_BASE_URL


def test_timeout_is_unset_unless_configured():
    assert config.DEFAULT_POKEAPI_TIMEOUT is None
    assert config._coerce_float(None, config.DEFAULT_POKEAPI_TIMEOUT) is None
    assert config._coerce_float("5", config.DEFAULT_POKEAPI_TIMEOUT) == 5.0
