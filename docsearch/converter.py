"""Reading the search configuration and requests, and writing answers, as JSON."""

from __future__ import annotations

import json
import os
from typing import Any, Iterable, Sequence

from docsearch.server import RelativeIndex

DEFAULT_CONFIG_PATH = "../config.json"
DEFAULT_REQUESTS_PATH = "../requests.json"
DEFAULT_ANSWERS_PATH = "../answers.json"
DEFAULT_RESPONSE_LIMIT = 5


def _load_json(path: str) -> Any:
    with open(path, encoding="utf-8") as handle:
        return json.load(handle)


def _extract_array(path: str, key: str) -> list[str]:
    if not os.path.isfile(path):
        raise ValueError(f"Wrong path: {path}")
    data = _load_json(path)
    values = data.get(key) if isinstance(data, dict) else None
    if not isinstance(values, list) or not all(isinstance(v, str) for v in values):
        raise ValueError(f"'{key}' must be a list of strings in {path}")
    return values


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


class ConverterJSON:
    """Access to config.json, requests.json and answers.json files.

    Paths passed to the constructor are loaded immediately; omitted ones keep
    their default location and are not read.
    """

    def __init__(
        self,
        config_path: str | None = None,
        requests_path: str | None = None,
        answers_path: str | None = None,
    ) -> None:
        self._config_path = DEFAULT_CONFIG_PATH
        self._requests_path = DEFAULT_REQUESTS_PATH
        self._answers_path = DEFAULT_ANSWERS_PATH
        self._documents: list[str] = []
        self._response_limit = 0
        self._requests: list[str] = []

        if config_path is not None:
            self.set_config_path(config_path)
        if requests_path is not None:
            self.set_requests_path(requests_path)
        if answers_path is not None:
            self.set_answers_path(answers_path)

    def text_documents(self) -> list[str]:
        """Return the document paths listed under "files" in the config."""
        return list(self._documents)

    def response_limit(self) -> int:
        """Return the maximum number of responses per request."""
        if self._response_limit == 0:
            raise ValueError("response limit missing")
        return self._response_limit

    def requests(self) -> list[str]:
        """Return the queries listed under "requests"."""
        return list(self._requests)

    def put_answers(self, answers: Iterable[Sequence[RelativeIndex]]) -> None:
        """Write search results to the answers file."""
        record: dict[str, Any] | None = None
        for number, found in enumerate(answers, 1):
            if record is None:
                record = {"answers": {}}
            # Request ids have three significant digits and wrap after 999.
            entry = record["answers"].setdefault(f"request{number % 1000:04d}", {})
            entry["result"] = "false"
            for position, item in enumerate(found):
                entry["result"] = "true"
                relevance = entry.setdefault("relevance", [])
                value = {"docid": item.doc_id, "rank": item.rank}
                if position < len(relevance):
                    relevance[position] = value
                else:
                    relevance.append(value)

        with open(self._answers_path, "w", encoding="utf-8") as handle:
            handle.write(json.dumps(record, indent=2, sort_keys=True))
            handle.write("\n")

    def set_config_path(self, path: str) -> None:
        """Load documents and response limit from the config file at ``path``."""
        self._config_path = path
        self._documents = _extract_array(path, "files")
        self._response_limit = self._read_response_limit()

    def set_requests_path(self, path: str) -> None:
        """Load requests from the file at ``path``."""
        self._requests_path = path
        self._requests = _extract_array(path, "requests")

    def set_answers_path(self, path: str) -> None:
        """Set where answers are written."""
        self._answers_path = path

    def _read_response_limit(self) -> int:
        if not os.path.isfile(self._config_path):
            raise ValueError("missing config file")
        data = _load_json(self._config_path)
        config = data.get("config") if isinstance(data, dict) else None
        if isinstance(config, dict):
            value = config.get("max_responses")
            if _is_number(value) and value > 0:
                return int(value)
        return DEFAULT_RESPONSE_LIMIT