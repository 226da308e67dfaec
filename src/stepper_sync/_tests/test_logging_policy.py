from stepper_sync.logging_policy import load_logging_policy


def test_logging_policy_defaults():
    policy = load_logging_policy({})
    assert policy.log_operations is False
    assert policy.log_timing is False
    assert policy.log_long_press is False
    assert policy.any_enabled is False


def test_logging_policy_env_overrides():
    policy = load_logging_policy({"STEPPER_SYNC_LOG_OPS": "1", "STEPPER_SYNC_LOG_TIMING": "off"})
    assert policy.log_operations is True
    assert policy.log_timing is False
    assert policy.any_enabled is True


def test_logging_policy_master_switch():
    policy = load_logging_policy({"STEPPER_SYNC_LOG_ALL": "true"})
    assert policy.log_operations is True
    assert policy.log_timing is True
    assert policy.log_long_press is True
