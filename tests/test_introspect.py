from voltcheck.jsonpath import JSONInfo, format_json, json_depth, json_info, minify_json, validate_json


# --- format / minify / validate ---


def test_format_json_indents_and_keeps_key_order():
    assert format_json('{"b":1,"a":[1,2]}') == '{\n  "b": 1,\n  "a": [\n    1,\n    2\n  ]\n}'


def test_format_json_returns_invalid_text_unchanged():
    assert format_json("{oops") == "{oops"


def test_minify_json():
    assert minify_json('{\n  "a": [1, 2],\n  "b": "x y"\n}') == '{"a":[1,2],"b":"x y"}'
    assert minify_json("not json") == "not json"


def test_validate_json():
    assert validate_json('{"a": 1}')
    assert validate_json("null")
    assert not validate_json("")
    assert not validate_json("{a: 1}")


# --- depth ---


def test_depth_of_scalars_and_empty_containers():
    assert json_depth(None) == 0
    assert json_depth("x") == 0
    assert json_depth(3) == 0
    assert json_depth([]) == 1
    assert json_depth({}) == 1


def test_depth_of_nesting():
    assert json_depth({"a": 1}) == 1
    assert json_depth({"a": {}}) == 2
    assert json_depth([[], [[1]]]) == 3


def test_depth_of_deep_document():
    value = []
    for _ in range(5000):
        value = [value]
    assert json_depth(value) == 5001


# --- info ---


def test_json_info_object():
    info = json_info('{"a":1,"b":[1,2]}')
    assert info.to_dict() == {
        "valid": True,
        "size": 17,
        "type": "object",
        "depth": 2,
        "keys": 2,
        "length": 0,
    }


def test_json_info_array_and_scalars():
    assert json_info("[1,2,3]").to_dict()["length"] == 3
    assert json_info("[1,2,3]").to_dict()["keys"] == 0
    assert json_info("true").type == "boolean"
    assert json_info("null").type == "null"
    assert json_info('"s"').type == "string"
    assert json_info("1.5").type == "number"


def test_json_info_invalid_only_reports_size():
    assert json_info("{bad").to_dict() == {"valid": False, "size": 4}


def test_json_info_size_counts_utf8_bytes():
    assert json_info('"é"').size == 4


def test_json_info_is_dataclass():
    assert json_info("{}") == JSONInfo(valid=True, size=2, type="object", depth=1, keys=0, length=0)


def test_over_nested_document_is_invalid():
    text = "[" * 600 + "]" * 600
    assert not validate_json(text)
    assert minify_json(text) == text
    assert json_info(text).valid is False
