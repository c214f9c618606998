# docsearch

A small local search engine. It builds an inverted index over a set of text
files, runs a list of queries against it and writes ranked answers as JSON.

## How it works

- Only the first line of each document file is indexed. A file that cannot
  be opened is reported (`Path file missing: <path>`) and skipped, so
  document ids number the files that were read, from 0.
- Words are split on whitespace and matched exactly (case-sensitive, no
  punctuation stripping).
- For every query, the distinct query words are looked up and their counts
  are summed per document (absolute relevance).
- A document's rank is its absolute relevance divided by the best document's,
  rounded to three decimals.
- Results are ordered by rank (highest first), then by document id, and cut
  to the response limit. A query with no matching words gets an empty result.

## Input files

`config.json` lists the documents and the response limit:

```json
{
  "config": {
    "max_responses": 5
  },
  "files": [
    "resources/file001.txt",
    "resources/file002.txt"
  ]
}
```

If `max_responses` is missing, not a number or not positive, the limit is 5.
`files` must be a list of strings.

`requests.json` lists the queries under `requests`, also a list of strings:

```json
{
  "requests": [
    "milk water",
    "sugar"
  ]
}
```

## Output

The answers file holds one entry per request, numbered from `request0001`
(the number wraps after `request0999`). Keys are written sorted, with an
indent of two:

```json
{
  "answers": {
    "request0001": {
      "relevance": [
        {"docid": 2, "rank": 1.0},
        {"docid": 0, "rank": 0.7},
        {"docid": 1, "rank": 0.3}
      ],
      "result": "true"
    },
    "request0002": {
      "result": "false"
    }
  }
}
```

With no requests at all, the file holds `null`.

## Command line

```
docsearch [--config PATH] [--requests PATH] [--answers PATH]
```

The defaults are `../config.json`, `../requests.json` and `../answers.json`,
relative to the current directory. The command reads the config and
requests, indexes the listed documents and writes the answers. A missing
config or requests file, malformed JSON, or a wrongly shaped `files` or
`requests` entry is printed as a message and nothing is written; the exit
status is 0 in every case.

## Library use

```python
from docsearch.index import InvertedIndex
from docsearch.server import SearchServer
from docsearch.converter import ConverterJSON

index = InvertedIndex()
index.update_document_base(["docs/a.txt", "docs/b.txt"])
print(index.get_word_count("milk"))   # list of Entry(doc_id, count), by doc_id

server = SearchServer(index)
results = server.search(["milk water"], 5)   # list of lists of RelativeIndex

converter = ConverterJSON()
converter.set_config_path("config.json")
converter.set_requests_path("requests.json")
converter.set_answers_path("answers.json")
converter.put_answers(server.search(converter.requests(), converter.response_limit()))
```

`ConverterJSON(config_path, requests_path, answers_path)` loads the paths it
is given straight away; omitted ones keep their defaults and are not read.
`response_limit()` raises `ValueError` while no config has been loaded, and
the setters raise `ValueError` for a missing file or a wrongly shaped entry.
`get_word_count` prints `Docs is empty!` and returns an empty list when no
documents are indexed.

## What it does not do

The index lives in memory only and is rebuilt on every run; nothing is
stored between runs. There is no interactive prompt or network service, and
no normalisation of words (case folding, stemming or stop words).

## Running the tests

```
pip install -e ".[test]"
pytest
```