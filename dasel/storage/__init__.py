"""Parsers for JSON, YAML, TOML, XML, CSV and plain output, with lookup, loading and writing."""