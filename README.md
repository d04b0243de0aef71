# snipstash

A small command-line tool for keeping text snippets: code fragments, shell
one-liners, anything you want to find again later. Snippets are stored as
JSON in `~/.snippet-manger/snippets.json` under your home directory. The
directory is created the first time a snippet is saved; a missing file is
treated as an empty collection.

## Installation

```
pip install .
```

## Usage

Add a snippet. `--name`/`-n` and `--content`/`-c` are required;
`--description`/`-d` is optional; `--tag`/`-t` may be given several times,
and each value may hold a comma-separated list of tags:

```
snipstash add --name "list files" --content "ls -la" --description "long listing" --tag shell,unix
snipstash add -n greet -c "echo hello" -t shell -t demo
```

The new snippet is printed after it has been saved.

Show every stored snippet, one after another between separator lines:

```
snipstash list
```

Show one snippet by its numeric id:

```
snipstash get --id 1
```

Delete a snippet by id; the remaining snippets are printed afterwards:

```
snipstash delete --id 1
```

Each new snippet gets the id one higher than the largest id already stored.
Ids may be written in decimal, with a `0x`, `0o` or `0b` prefix, or with a
leading zero for octal. An id that cannot be parsed, or that no snippet
carries, prints an error message and the command exits with status 1. Running
`snipstash` with no command prints the help text.

## Using it from Python

```python
from pathlib import Path

from snipstash.snippet import get_snippet, new_snippet, set_next_id
from snipstash.store import load_snippets, save_snippets

path = Path("snippets.json")
snippets = load_snippets(path)
set_next_id(snippets)
snippets.append(new_snippet("greet", "echo hello", ["shell"], "say hello"))
save_snippets(snippets, path)

print(get_snippet("1", snippets))
```

`snipstash.snippet` also provides `delete_snippet`, which returns a new list
without the matching snippet, `format_snippet_list`, `parse_id`, and the
`Snippet` dataclass with `to_dict` and `from_dict`. A missing id raises
`SnippetNotFoundError`; an unparsable id raises `ValueError`.
`snipstash.store` raises `StoreError` when the file cannot be read, parsed or
written, and `snippets_file_path` returns the default file location.

## Running the tests

```
pip install .[test]
pytest
```