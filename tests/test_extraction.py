from voltcheck.assertions import ResponseDescription
from voltcheck.extraction import (
    ExtractionRule,
    ExtractionType,
    extract_json_value,
    extract_jsonpath_value,
    extract_regex_value,
    extract_value,
    extract_variables,
)


def rule(type, path, name="v"):
    return ExtractionRule(type=ExtractionType(type), path=path, variable_name=name)


# --- json ---


def test_json_strings_are_raw_and_others_are_json_text():
    body = '{"token":"t-1","count":3,"ok":false,"user":{"id":7},"list":[1,"a"],"none":null}'
    assert extract_json_value(body, "token") == "t-1"
    assert extract_json_value(body, "count") == "3"
    assert extract_json_value(body, "ok") == "false"
    assert extract_json_value(body, "user") == '{"id":7}'
    assert extract_json_value(body, "list") == '[1,"a"]'


def test_json_nothing_to_extract():
    body = '{"none":null}'
    assert extract_json_value(body, "none") is None
    assert extract_json_value(body, "missing") is None
    assert extract_json_value(body, "") is None
    assert extract_json_value("not json", "a") is None


# --- jsonpath ---


def test_jsonpath_first_match():
    body = '{"items":[{"id":"a"},{"id":"b"}],"meta":{"page":2}}'
    assert extract_jsonpath_value(body, "$.items[*].id") == "a"
    assert extract_jsonpath_value(body, "$.meta") == '{"page":2}'
    assert extract_jsonpath_value(body, "$.meta.page") == "2"


def test_jsonpath_nothing_to_extract():
    body = '{"items":[]}'
    assert extract_jsonpath_value(body, "$.items[*].id") is None
    assert extract_jsonpath_value(body, "$.[[[") is None
    assert extract_jsonpath_value("<html>", "$.items") is None


# --- regex ---


def test_regex_prefers_first_group():
    assert extract_regex_value("id=42; name=x", r"id=(\d+)") == "42"
    assert extract_regex_value("id=42", r"id=\d+") == "id=42"
    assert extract_regex_value("id=42", r"id=(x)?\d+") == "id=42"


def test_regex_nothing_to_extract():
    assert extract_regex_value("abc", r"\d+") is None
    assert extract_regex_value("abc", "(") is None


# --- extract_value / extract_variables ---


def test_extract_value_sources(users_response):
    assert extract_value(rule("json", "data.token"), users_response) == "t-42"
    assert extract_value(rule("header", "x-request-id"), users_response) == "abc123"
    assert extract_value(rule("header", "X-Missing"), users_response) is None
    assert extract_value(rule("regex", r'"name":"(\w+)"'), users_response) == "John"
    assert extract_value(rule("status", ""), users_response) == "200"
    assert extract_value(rule("body", ""), users_response) == users_response.body
    assert extract_value(rule("jsonpath", "$.data.users[0].age"), users_response) == "30"


def test_extract_variables_skips_empty_rules(users_response):
    rules = [
        rule("json", "data.token", "token"),
        rule("json", "data.total", "total"),
        rule("header", "Content-Type", "contentType"),
        rule("regex", "nomatch(\\d)", "missing"),
    ]
    assert extract_variables(rules, users_response) == {
        "token": "t-42",
        "contentType": "application/json; charset=utf-8",
    }


def test_extract_variables_later_rule_wins():
    response = ResponseDescription(201, body="{}")
    rules = [rule("status", "", "x"), rule("body", "", "x")]
    assert extract_variables(rules, response) == {"x": "{}"}
