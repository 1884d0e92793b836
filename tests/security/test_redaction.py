from blazesql.security.redaction import REDACTED_VALUE, is_sensitive_key, redact_params


def test_redact_params_masks_sensitive_values_in_place():
    params = ["alice", "my password is hunter2", 42, b"Bearer abc"]
    assert redact_params(params) == ["alice", REDACTED_VALUE, 42, REDACTED_VALUE]


def test_redact_params_masks_sensitive_dict_keys():
    params = [{"api_key": "k-123", "name": "bob"}]
    assert redact_params(params) == [{"api_key": REDACTED_VALUE, "name": "bob"}]


def test_redact_params_preserves_positions_in_nested_sequences():
    assert redact_params([("a", "secret-token"), ["b"]]) == [("a", REDACTED_VALUE), ["b"]]


def test_sensitive_key_detection_ignores_separators():
    assert is_sensitive_key("Private-Key")
    assert is_sensitive_key("card_number")
    assert not is_sensitive_key("username")


def test_redact_params_masks_values_bound_to_sensitive_columns():
    params = ["hunter2", "alice", 7]
    columns = ['"password"', '"users"."name"', None]
    assert redact_params(params, columns) == [REDACTED_VALUE, "alice", 7]


def test_redact_params_tolerates_short_column_lists():
    assert redact_params(["x", "y"], ['"pwd"']) == [REDACTED_VALUE, "y"]
