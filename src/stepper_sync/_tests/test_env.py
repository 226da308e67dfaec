from stepper_sync.utils.env import env_bool, env_float, env_optional_float, env_str


def test_env_helpers_parse_and_fall_back():
    env = {"A": " text ", "B": "on", "C": "2.5", "D": "junk", "E": ""}

    assert env_str("A", None, env) == "text"
    assert env_str("E", "fallback", env) == "fallback"
    assert env_bool("B", False, env) is True
    assert env_bool("D", True, env) is True
    assert env_float("C", 0.0, env) == 2.5
    assert env_float("D", 1.0, env) == 1.0
    assert env_optional_float("C", env) == 2.5
    assert env_optional_float("D", env) is None
    assert env_optional_float("MISSING", env) is None
