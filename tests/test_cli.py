import json
import textwrap

import pytest
import typer
from typer.testing import CliRunner

from voltcheck import __version__
from voltcheck.cli import app, parse_var_options, run_suite
from voltcheck.assertions import ResponseDescription
from voltcheck.suites import validate_suite_yaml

runner = CliRunner()

SUITE = textwrap.dedent(
    """
    version: 1
    name: Users API
    variables:
      expectedName: John
      field: name
    assertions:
      - {id: status_ok, type: status, operator: equals, expected: "200"}
      - {id: user_name, type: bodyJson, property: "data.users[0].{{field}}", operator: equals, expected: '"{{expectedName}}"'}
      - {id: json_header, type: headerEquals, property: content-type, operator: contains, expected: json}
    extract:
      - {type: json, path: data.token, variable: token}
      - {type: header, path: X-Request-Id, variable: requestId}
    """
)

RESPONSE = {
    "statusCode": 200,
    "headers": {"Content-Type": "application/json", "X-Request-Id": "r-1"},
    "body": {"data": {"users": [{"name": "John"}], "token": "t-42"}},
    "timingMs": 35,
}


def write_inputs(tmp_path, suite=SUITE, response=RESPONSE):
    suite_path = tmp_path / "suite.yaml"
    suite_path.write_text(suite, encoding="utf-8")
    response_path = tmp_path / "response.json"
    response_path.write_text(json.dumps(response), encoding="utf-8")
    return str(suite_path), str(response_path)


# --- helpers ---


def test_parse_var_options():
    assert parse_var_options(["a=1", "b = x=y", "c="]) == {"a": "1", "b": " x=y", "c": ""}
    assert parse_var_options(None) == {}


def test_parse_var_options_rejects_missing_separator():
    with pytest.raises(typer.BadParameter):
        parse_var_options(["novalue"])
    with pytest.raises(typer.BadParameter):
        parse_var_options(["=x"])


def test_run_suite_interpolates_and_extracts():
    suite, _ = validate_suite_yaml(SUITE)
    response = ResponseDescription(
        200,
        headers={"content-type": "application/json", "x-request-id": "r-9"},
        body='{"data":{"users":[{"name":"Jane"}],"token":"t-1"}}',
    )
    report = run_suite(suite, response, {"expectedName": "Jane"})
    assert report.failed == 0
    assert report.get_result("user_name").property == "data.users[0].name"
    assert report.get_result("user_name").expected == '"Jane"'
    assert report.extracted == {"token": "t-1", "requestId": "r-9"}
    # The suite itself is left untouched
    assert suite.assertions[1].expected == '"{{expectedName}}"'


# --- version ---


def test_version():
    result = runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


# --- run ---


def test_run_passing_suite_writes_report(tmp_path):
    suite_path, response_path = write_inputs(tmp_path)
    report_dir = tmp_path / "reports"
    result = runner.invoke(app, ["run", suite_path, response_path, "--report-dir", str(report_dir)])
    assert result.exit_code == 0, result.output
    assert "PASSED" in result.output
    reports = list(report_dir.glob("*.json"))
    assert len(reports) == 1
    saved = json.loads(reports[0].read_text(encoding="utf-8"))
    assert saved["status"] == "passed"
    assert saved["extracted"] == {"token": "t-42", "requestId": "r-1"}


def test_run_failing_suite_exits_1(tmp_path):
    suite_path, response_path = write_inputs(tmp_path, response=dict(RESPONSE, statusCode=503))
    result = runner.invoke(app, ["run", suite_path, response_path, "--no-report", "--quiet"])
    assert result.exit_code == 1
    assert "status_ok" in result.output
    assert "Expected 200, got 503" in result.output
    assert "FAILED: 2 passed, 1 failed" in result.output
    assert not (tmp_path / "reports").exists()


def test_run_var_override(tmp_path):
    suite_path, response_path = write_inputs(tmp_path)
    result = runner.invoke(
        app, ["run", suite_path, response_path, "--no-report", "-q", "--var", "expectedName=Jane"]
    )
    assert result.exit_code == 1
    assert "user_name" in result.output


def test_run_json_output(tmp_path):
    suite_path, response_path = write_inputs(tmp_path)
    result = runner.invoke(app, ["run", suite_path, response_path, "--no-report", "--output", "json"])
    assert result.exit_code == 0
    data = json.loads(result.output)
    assert data["suite_name"] == "Users API"
    assert [r["passed"] for r in data["results"]] == [True, True, True]


def test_run_invalid_suite(tmp_path):
    suite_path, response_path = write_inputs(tmp_path, suite="version: 1\nname: x\n")
    result = runner.invoke(app, ["run", suite_path, response_path, "--no-report"])
    assert result.exit_code == 1
    assert "Suite validation failed" in result.output


def test_run_rejects_date_expected(tmp_path):
    suite = "version: 1\nname: x\nassertions:\n  - {id: a, type: status, operator: equals, expected: 2024-01-01}\n"
    suite_path, response_path = write_inputs(tmp_path, suite=suite)
    result = runner.invoke(app, ["run", suite_path, response_path, "--no-report"])
    assert result.exit_code == 1
    assert "Suite validation failed" in result.output
    assert "assertions[0].expected" in result.output


def test_run_invalid_response(tmp_path):
    suite_path, response_path = write_inputs(tmp_path, response={"statusCode": "200"})
    result = runner.invoke(app, ["run", suite_path, response_path, "--no-report"])
    assert result.exit_code == 1
    assert "Response validation failed" in result.output


def test_run_missing_file(tmp_path):
    result = runner.invoke(app, ["run", str(tmp_path / "nope.yaml"), str(tmp_path / "nope.json")])
    assert result.exit_code != 0


# --- validate ---


def test_validate_valid_suite(tmp_path):
    suite_path, _ = write_inputs(tmp_path)
    result = runner.invoke(app, ["validate", suite_path])
    assert result.exit_code == 0
    assert "Valid suite" in result.output
    assert "Assertions: 3" in result.output


def test_validate_reports_warnings(tmp_path):
    suite = "version: 1\nname: x\nassertions:\n  - {id: a, type: cookie, operator: equals}\n"
    suite_path, _ = write_inputs(tmp_path, suite=suite)
    result = runner.invoke(app, ["validate", suite_path])
    assert result.exit_code == 0
    assert "warning(s)" in result.output


def test_validate_invalid_suite(tmp_path):
    suite_path, _ = write_inputs(tmp_path, suite="version: 0\nname: x\nassertions: []\n")
    result = runner.invoke(app, ["validate", suite_path])
    assert result.exit_code == 1
    assert "Validation failed" in result.output


# --- render ---


def test_render():
    result = runner.invoke(app, ["render", "https://{{host}}/[{{id}}]/{{other}}", "--var", "host=api", "--var", "id=7"])
    assert result.exit_code == 0
    assert result.output == "https://api/[7]/{{other}}\n"


def test_render_list():
    result = runner.invoke(app, ["render", "{{b}} {{a}} {{b}}", "--list"])
    assert result.exit_code == 0
    assert result.output == "b\na\n"


def test_render_bad_var():
    result = runner.invoke(app, ["render", "{{a}}", "--var", "nope"])
    assert result.exit_code != 0


# --- JSON commands ---


def test_extract_command(tmp_path):
    document = tmp_path / "doc.json"
    document.write_text('{"data":{"users":[{"name":"John"}],"none":null}}', encoding="utf-8")
    assert runner.invoke(app, ["extract", str(document), "data.users[0].name"]).output == '"John"\n'
    assert runner.invoke(app, ["extract", str(document), "data.none"]).output == "null\n"
    assert runner.invoke(app, ["extract", str(document), "data.nope"]).output == "undefined\n"


def test_format_command(tmp_path):
    document = tmp_path / "doc.json"
    document.write_text('{"a": [1, 2]}', encoding="utf-8")
    assert runner.invoke(app, ["format", str(document), "--minify"]).output == '{"a":[1,2]}\n'
    pretty = runner.invoke(app, ["format", str(document)]).output
    assert pretty == '{\n  "a": [\n    1,\n    2\n  ]\n}\n'


def test_info_command(tmp_path):
    document = tmp_path / "doc.json"
    document.write_text("[[1], {}]", encoding="utf-8")
    result = runner.invoke(app, ["info", str(document)])
    assert result.exit_code == 0
    assert json.loads(result.output) == {
        "valid": True,
        "size": 9,
        "type": "array",
        "depth": 2,
        "keys": 0,
        "length": 2,
    }
