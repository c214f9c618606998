import json

import pytest

from docsearch.converter import ConverterJSON
from docsearch.server import RelativeIndex

EXPECTED_DOCS = [
    "../resources/file0001.txt",
    "../resources/file0002.txt",
    "../resources/file0003.txt",
    "../resources/file0004.txt",
    "../resources/file0005.txt",
    "../resources/file0006.txt",
    "../resources/file0007.txt",
    "../resources/file0008.txt",
    "../resources/file0009.txt",
]
EXPECTED_REQUESTS = ["a", "v", "g", "q"]


def _write_json(path, data):
    path.write_text(json.dumps(data), encoding="utf-8")
    return str(path)


@pytest.fixture
def config_path(tmp_path):
    return _write_json(
        tmp_path / "testConfig.json",
        {
            "config": {"name": "SearchEngine", "version": "0.1", "max_responses": 7},
            "files": EXPECTED_DOCS,
        },
    )


@pytest.fixture
def requests_path(tmp_path):
    return _write_json(tmp_path / "testRequests.json", {"requests": EXPECTED_REQUESTS})


def test_constructor_paths(tmp_path, config_path, requests_path):
    converter = ConverterJSON(config_path, requests_path, str(tmp_path / "testAnswers.json"))
    assert converter.text_documents() == EXPECTED_DOCS
    assert converter.requests() == EXPECTED_REQUESTS
    assert converter.response_limit() == 7


def test_set_paths(config_path, requests_path):
    converter = ConverterJSON()
    converter.set_config_path(config_path)
    converter.set_requests_path(requests_path)
    assert converter.text_documents() == EXPECTED_DOCS
    assert converter.requests() == EXPECTED_REQUESTS
    assert converter.response_limit() == 7


def test_put_answers(tmp_path):
    answers_path = tmp_path / "testAnswers.json"
    converter = ConverterJSON()
    converter.set_answers_path(str(answers_path))
    converter.put_answers(
        [
            [RelativeIndex(2, 1), RelativeIndex(0, 0.7), RelativeIndex(1, 0.3)],
            [],
        ]
    )
    result = json.loads(answers_path.read_text(encoding="utf-8"))
    assert result == {
        "answers": {
            "request0001": {
                "relevance": [
                    {"docid": 2, "rank": 1},
                    {"docid": 0, "rank": 0.7},
                    {"docid": 1, "rank": 0.3},
                ],
                "result": "true",
            },
            "request0002": {"result": "false"},
        }
    }


def test_put_answers_is_indented_with_trailing_newline(tmp_path):
    answers_path = tmp_path / "answers.json"
    converter = ConverterJSON(answers_path=str(answers_path))
    converter.put_answers([[]])
    text = answers_path.read_text(encoding="utf-8")
    assert text.startswith('{\n  "answers": {\n    "request0001"')
    assert text.endswith("}\n")


def test_put_no_answers_writes_null(tmp_path):
    answers_path = tmp_path / "answers.json"
    converter = ConverterJSON(answers_path=str(answers_path))
    converter.put_answers([])
    assert json.loads(answers_path.read_text(encoding="utf-8")) is None


def test_request_ids_wrap_after_999(tmp_path):
    answers_path = tmp_path / "answers.json"
    converter = ConverterJSON(answers_path=str(answers_path))
    converter.put_answers([[RelativeIndex(0, 1)]] + [[] for _ in range(1000)])
    answers = json.loads(answers_path.read_text(encoding="utf-8"))["answers"]
    assert len(answers) == 1000
    assert "request0000" in answers
    assert answers["request0001"]["result"] == "false"


def test_response_limit_missing_without_config():
    with pytest.raises(ValueError, match="response limit missing"):
        ConverterJSON().response_limit()


@pytest.mark.parametrize(
    "config",
    [{}, {"max_responses": 0}, {"max_responses": -3}, {"name": "SearchEngine"}],
)
def test_response_limit_defaults_to_five(tmp_path, config):
    path = _write_json(tmp_path / "config.json", {"config": config, "files": []})
    assert ConverterJSON(config_path=path).response_limit() == 5


def test_response_limit_default_without_config_section(tmp_path):
    path = _write_json(tmp_path / "config.json", {"files": []})
    assert ConverterJSON(config_path=path).response_limit() == 5


def test_wrong_config_path(tmp_path):
    missing = str(tmp_path / "missing.json")
    with pytest.raises(ValueError, match="Wrong path: "):
        ConverterJSON(config_path=missing)


def test_wrong_requests_path(tmp_path):
    missing = str(tmp_path / "missing.json")
    converter = ConverterJSON()
    with pytest.raises(ValueError, match="Wrong path: "):
        converter.set_requests_path(missing)


def test_requests_must_be_strings(tmp_path):
    path = _write_json(tmp_path / "requests.json", {"requests": [1, 2]})
    with pytest.raises(ValueError):
        ConverterJSON(requests_path=path)


def test_returned_lists_are_copies(config_path):
    converter = ConverterJSON(config_path=config_path)
    converter.text_documents().clear()
    assert converter.text_documents() == EXPECTED_DOCS