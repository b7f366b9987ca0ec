"""Reading and writing of YAML, including multi-document streams."""

from typing import Any

import yaml

from .base import (
    BasicMultiDocument,
    BasicSingleDocument,
    MultiDocument,
    ReadParser,
    SingleDocument,
    WriteParser,
    _format_value,
)
from .colourise import colourise
from .options import OptionKey


class _Loader(yaml.SafeLoader):
    """Safe loader that leaves timestamps as strings."""


_Loader.yaml_implicit_resolvers = {
    first: [
        (tag, regexp)
        for tag, regexp in resolvers
        if tag != "tag:yaml.org,2002:timestamp"
    ]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


def _cleanup(value: Any) -> Any:
    if isinstance(value, list):
        return [_cleanup(item) for item in value]
    if isinstance(value, dict):
        return {
            key if isinstance(key, str) else _format_value(key): _cleanup(item)
            for key, item in value.items()
        }
    return value


def _dump(document: Any) -> str:
    text = yaml.dump(
        document,
        Dumper=yaml.SafeDumper,
        default_flow_style=False,
        sort_keys=True,
        allow_unicode=True,
    )
    if text.endswith("\n...\n"):
        text = text[: -len("...\n")]
    return text


class YAMLParser(ReadParser, WriteParser):
    """Parser for YAML data."""

    def from_bytes(self, byte_data: bytes | None) -> Any:
        try:
            documents = [
                _cleanup(doc)
                for doc in yaml.load_all(byte_data or b"", Loader=_Loader)
            ]
        except (yaml.YAMLError, UnicodeDecodeError) as exc:
            raise ValueError(f"could not unmarshal data: {exc}") from exc

        match documents:
            case []:
                return None
            case [single]:
                return BasicSingleDocument(single)
            case _:
                return BasicMultiDocument(documents)

    def to_bytes(self, value: Any, *args) -> bytes:
        use_colour = False
        for option in args:
            if option.key == OptionKey.COLOURISE and isinstance(option.value, bool):
                use_colour = option.value

        chunks = []
        if isinstance(value, SingleDocument):
            try:
                chunks.append(_dump(value.document()))
            except yaml.YAMLError as exc:
                raise ValueError(f"could not encode single document: {exc}") from exc
        elif isinstance(value, MultiDocument):
            for index, document in enumerate(value.documents()):
                try:
                    text = _dump(document)
                except yaml.YAMLError as exc:
                    raise ValueError(
                        f"could not encode multi document [{index}]: {exc}"
                    ) from exc
                chunks.append(text if index == 0 else "---\n" + text)
        else:
            try:
                chunks.append(_dump(value))
            except yaml.YAMLError as exc:
                raise ValueError(f"could not encode default document type: {exc}") from exc

        output = "".join(chunks)
        if use_colour:
            output = colourise(output, "yaml")
        return output.encode("utf-8")