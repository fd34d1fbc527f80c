import json

from voltcheck import wire

RESPONSE = json.dumps(
    {
        "statusCode": 200,
        "headers": {"Content-Type": "application/json"},
        "body": '{"user":{"age":30,"name":"John"}}',
        "timingMs": 42,
    }
)


def assertion(id, type, operator, expected="", property="", enabled=True):
    return {
        "id": id,
        "type": type,
        "property": property,
        "operator": operator,
        "expected": expected,
        "enabled": enabled,
    }


# --- templates ---


def test_substitute_variables():
    assert wire.substitute_variables("{{a}}/{{b}}", '{"a":"1"}') == "1/{{b}}"


def test_substitute_variables_bad_table_returns_text():
    for table in ["not json", "[]", '{"a": 1}', ""]:
        assert wire.substitute_variables("{{a}}", table) == "{{a}}"


def test_substitute_variables_batch():
    result = wire.substitute_variables_batch('["{{a}}","x","{{ a }}!"]', '{"a":"é"}')
    assert json.loads(result) == ["é", "x", "é!"]


def test_substitute_variables_batch_fallbacks():
    assert wire.substitute_variables_batch("nope", '{"a":"1"}') == "[]"
    assert wire.substitute_variables_batch('["ok", 1]', '{"a":"1"}') == "[]"
    assert json.loads(wire.substitute_variables_batch('["{{a}}"]', "nope")) == ["{{a}}"]


def test_find_and_has_variables():
    assert wire.find_variables("{{b}}{{a}}{{b}}") == '["b","a"]'
    assert wire.find_variables("none") == "[]"
    assert wire.has_variables("{{a}}") is True
    assert wire.has_variables("{a}") is False


# --- JSON ---


def test_json_extract():
    assert wire.json_extract('{"data":{"users":[{"name":"John"}]}}', "data.users[0].name") == '"John"'
    assert wire.json_extract("{", "a") == "undefined"


def test_json_extract_batch():
    result = wire.json_extract_batch('{"a":1,"b":{"c":[true]}}', '["b.c[0]","z","a"]')
    assert result == '{"b.c[0]":true,"a":1}'


def test_json_extract_batch_fallbacks():
    assert wire.json_extract_batch("nope", '["a"]') == "{}"
    assert wire.json_extract_batch('{"a":1}', "nope") == "{}"
    assert wire.json_extract_batch('{"a":1}', '{"a":1}') == "{}"


def test_json_format_minify_validate():
    assert wire.json_format('{"a":1}') == '{\n  "a": 1\n}'
    assert wire.json_format("{bad") == "{bad"
    assert wire.json_minify('{ "a" : [ 1 ] }') == '{"a":[1]}'
    assert wire.json_minify("{bad") == "{bad"
    assert wire.json_validate("[]") is True
    assert wire.json_validate("[") is False


def test_json_info():
    assert json.loads(wire.json_info('{"a":[1]}')) == {
        "valid": True,
        "size": 9,
        "type": "object",
        "depth": 2,
        "keys": 1,
        "length": 0,
    }
    assert wire.json_info("nah") == '{"valid":false,"size":3}'


# --- run_assertions ---


def test_run_assertions():
    assertions = json.dumps(
        [
            assertion("a1", "status", "equals", "200"),
            assertion("a2", "bodyJson", "equals", "30", property="user.age"),
            assertion("a3", "headerEquals", "contains", "json", property="content-type"),
            assertion("a4", "status", "equals", "500", enabled=False),
            assertion("a5", "xml", "equals"),
        ]
    )
    results = json.loads(wire.run_assertions(assertions, RESPONSE))
    assert [r["assertionId"] for r in results] == ["a1", "a2", "a3", "a4", "a5"]
    assert [r["passed"] for r in results] == [True, True, True, True, False]
    assert results[0] == {
        "assertionId": "a1",
        "passed": True,
        "actual": "200",
        "message": "Status code is 200",
    }
    assert results[3]["message"] == "Skipped (disabled)"
    assert results[4]["message"] == "Unknown assertion type: xml"


def test_run_assertions_empty_list():
    assert wire.run_assertions("[]", RESPONSE) == "[]"


def test_run_assertions_bad_inputs_return_empty_list():
    good = json.dumps([assertion("a1", "status", "equals", "200")])
    assert wire.run_assertions("nope", RESPONSE) == "[]"
    assert wire.run_assertions(good, "nope") == "[]"
    assert wire.run_assertions(json.dumps([{"id": "a1", "type": "status"}]), RESPONSE) == "[]"
    assert wire.run_assertions(good, json.dumps({"statusCode": 200, "headers": {}, "body": ""})) == "[]"
    bad_headers = json.dumps({"statusCode": 200, "headers": {"A": 1}, "body": "", "timingMs": 1})
    assert wire.run_assertions(good, bad_headers) == "[]"


def test_run_assertions_non_json_body_fails_only_body_json():
    response = json.dumps({"statusCode": 200, "headers": {}, "body": "plain", "timingMs": 1})
    assertions = json.dumps(
        [
            assertion("a1", "bodyJson", "exists", property="x"),
            assertion("a2", "bodyContains", "contains", "lai"),
        ]
    )
    results = json.loads(wire.run_assertions(assertions, response))
    assert results[0] == {
        "assertionId": "a1",
        "passed": False,
        "actual": "Invalid JSON",
        "message": "Response body is not valid JSON",
    }
    assert results[1]["passed"] is True


def test_run_assertions_deeply_nested_body_is_invalid_json():
    response = json.dumps({"statusCode": 200, "headers": {}, "body": "[" * 600 + "]" * 600, "timingMs": 1})
    assertions = json.dumps([assertion("a1", "bodyJson", "equals", "[]", property="")])
    results = json.loads(wire.run_assertions(assertions, response))
    assert results == [
        {
            "assertionId": "a1",
            "passed": False,
            "actual": "Invalid JSON",
            "message": "Response body is not valid JSON",
        }
    ]
