# dasel

Read and write structured data documents in JSON, YAML, TOML, XML and CSV.
`dasel` reads a document into plain Python values (dicts, lists, strings,
numbers). It writes those values back out in any of the supported formats, so
it can convert from one format to another. It also splits dasel selector
strings such as `.users.(name=Tom).email` into their parts.

## Parsers

You can look up parsers by name or by file extension:

```python
from dasel.storage.registry import (
    new_read_parser_from_string,
    new_write_parser_from_string,
    new_read_parser_from_filename,
)

reader = new_read_parser_from_string("json")
doc = reader.from_bytes(b'{"name": "Tom"}')
doc.document()            # {'name': 'Tom'}

writer = new_write_parser_from_string("yaml")
writer.to_bytes(doc)      # b'name: Tom\n'

new_read_parser_from_filename("config.toml")   # a TOMLParser
```

The read parser names are `json`, `yaml`, `yml`, `toml`, `xml` and `csv`. The
write parsers take the same names, plus `plain` and `-`. File extension lookup
is case-insensitive and covers `.json`, `.yaml`, `.yml`, `.toml`, `.xml` and
`.csv`. An unknown name or extension raises `UnknownParserError`, whose message
reads `unknown parser: <name>`.

The parser classes can also be used directly: `JSONParser`, `YAMLParser`,
`TOMLParser`, `XMLParser`, `CSVParser` and `PlainParser`. They live in
`dasel.storage.json_parser`, `yaml_parser`, `toml_parser`, `xml_parser`,
`csv_parser` and `plain`.

### What reading returns

- JSON and YAML input with exactly one document gives a
  `BasicSingleDocument`. Several documents give a `BasicMultiDocument`: for
  JSON that means values placed one after another, for YAML documents
  separated by `---`. Empty input gives `None`.
- TOML input always gives a `BasicSingleDocument`.
- XML input gives a `BasicSingleDocument` holding `{root_tag: ...}`. Attributes
  are stored under keys prefixed with `-` and mixed text under `#text`.
  Repeated elements become lists. The encoding named in the XML declaration is
  honoured, and so is a UTF-16 byte order mark. Empty or whitespace-only input
  gives `None`.
- CSV input gives a `CSVDocument`. It holds one dict per row and the header row
  in its original order. Rows whose cells are all empty are dropped. A row
  with the wrong number of fields is an error.

Malformed input raises `ValueError`. The messages start with
`could not unmarshal data` or `could not read csv file`. `PlainParser` cannot
read, and its `from_bytes` raises `PlainParserNotImplementedError`.

### What writing produces

`to_bytes` accepts a `SingleDocument`, a `MultiDocument` or a bare value.
Map keys are written in sorted order. Values that a format cannot hold as a
document, such as a bare string written as TOML, XML or CSV, are written as a
single line of plain text. The `plain` parser writes each document on a line
of its own.

## Loading and writing

```python
import io
from dasel.storage.registry import load, load_from_file, write
from dasel.storage.json_parser import JSONParser

doc = load_from_file("example.json", JSONParser())
doc = load(JSONParser(), io.BytesIO(b'{"name": "Tom"}'))

out = io.BytesIO()
write(JSONParser(), {"name": "Tom"}, None, out)
out.getvalue()            # b'{\n  "name": "Tom"\n}\n'
```

`write` accepts both binary and text streams. The third argument is the
document as it was first read. If that document reports `original_required()`
as true, as the document classes above do, it is written in place of the value.

If the file cannot be opened, `load_from_file` raises `OSError` with the message
`could not open file: ...`. A parser failure inside `write` is raised as
`ValueError("could not get byte data for file: ...")`. A failure of the stream
is raised as `OSError("could not write data: ...")`.

## Output options

Pass options as extra arguments to `to_bytes` or `write`:

```python
from dasel.storage.json_parser import JSONParser
from dasel.storage.base import BasicSingleDocument
from dasel.storage.options import (
    indent_option,
    pretty_print_option,
    colourise_option,
    escape_html_option,
)

doc = BasicSingleDocument({"name": "Tom"})
JSONParser().to_bytes(doc, pretty_print_option(False))   # b'{"name":"Tom"}\n'
JSONParser().to_bytes(doc, indent_option("   "))         # three-space indent
JSONParser().to_bytes(doc, escape_html_option(False))    # keep <, > and & as is
JSONParser().to_bytes(doc, colourise_option(True))       # terminal colours
```

- The JSON parser uses the indent, pretty-print, escape-HTML and colourise
  options. HTML escaping is on by default.
- The TOML parser uses indent and colourise.
- The YAML and XML parsers use colourise only.

`colourise(content, lexer)` from `dasel.storage.colourise` highlights text with
a named Pygments lexer, for a 256-colour terminal. It returns a string.

## Selectors

```python
from dasel.selector import (
    extract_next_selector,
    dynamic_selector_to_groups,
    find_dynamic_selector_parts,
)

extract_next_selector(".metadata.name")       # ('.metadata', 9)
extract_next_selector(r".before\.after.name") # ('.before.after', 14)
dynamic_selector_to_groups("(a=1)(b=2)")      # ['a=1', 'b=2']

parts = find_dynamic_selector_parts("a>=b")
parts.key, parts.comparison, parts.value      # ('a', '>=', 'b')
```

`extract_next_selector` returns the next selector and the number of UTF-8 bytes
it spans. If a dynamic selector has unbalanced brackets,
`dynamic_selector_to_groups` raises `DynamicSelectorBracketMismatchError`.

## What this package does not do

- There is no command-line tool. It does not install a `dasel` command.
- It does not evaluate selectors against data. The selector functions only
  split selector strings into parts. Selecting, putting and deleting values
  inside a document is not provided.
- It has no output templates.

## Running the tests

```
pip install -e .[test]
pytest
```