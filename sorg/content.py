"""Decoding of article and fragment source files into records."""

from __future__ import annotations

import datetime as dt
import logging
from pathlib import Path
from typing import Any, Dict, Mapping, Union

import yaml

from .errors import FrontmatterError, MissingFieldError
from .frontmatter import split_frontmatter
from .markdown import render_markdown
from .models import Article, Fragment

logger = logging.getLogger("sorg")

PathLike = Union[str, Path]

# Frontmatter keys understood by each record type, mapped to their scalar kind.
ARTICLE_FIELDS: Dict[str, str] = {
    "title": "str",
    "published_at": "datetime",
    "hook": "str",
    "image": "str",
    "attributions": "str",
    "hn_link": "str",
}

FRAGMENT_FIELDS: Dict[str, str] = {
    "title": "str",
    "published_at": "datetime",
    "image": "str",
}


class FrontmatterLoader(yaml.SafeLoader):
    """Safe loader that keeps booleans and numbers as their source text."""


for _tag in ("bool", "int", "float"):
    FrontmatterLoader.add_constructor(
        f"tag:yaml.org,2002:{_tag}", yaml.SafeLoader.construct_yaml_str
    )


def decode_frontmatter(block: str, path: PathLike) -> Dict[str, Any]:
    """Parse a YAML frontmatter block into a mapping."""
    if not block:
        return {}
    try:
        data = yaml.load(block, Loader=FrontmatterLoader)
    except yaml.YAMLError as exc:
        raise FrontmatterError(f"Invalid YAML frontmatter ({exc})", path) from exc
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise FrontmatterError("Frontmatter is not a mapping", path)
    return data


def _coerce_datetime(value: Any, key: str, path: PathLike) -> dt.datetime:
    if isinstance(value, dt.datetime):
        parsed = value
    elif isinstance(value, dt.date):
        parsed = dt.datetime.combine(value, dt.time.min)
    elif isinstance(value, str):
        text = value.strip()
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        try:
            parsed = dt.datetime.fromisoformat(text)
        except ValueError as exc:
            raise FrontmatterError(f"Invalid timestamp for {key} ({value!r})", path) from exc
    else:
        raise FrontmatterError(f"Invalid timestamp for {key} ({value!r})", path)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=dt.timezone.utc)
    return parsed


def _coerce(kind: str, value: Any, key: str, path: PathLike) -> Any:
    if kind == "datetime":
        return _coerce_datetime(value, key, path)
    if isinstance(value, (list, dict)):
        raise FrontmatterError(f"Expected a scalar for {key}", path)
    return str(value)


def decode_fields(data: Mapping[Any, Any], schema: Mapping[str, str], path: PathLike) -> Dict[str, Any]:
    """Pick the keys named in ``schema`` out of ``data``.

    Unknown keys are ignored. Absent or null string fields default to ``""``
    and absent timestamps to ``None`` so validation can report them.
    """
    values: Dict[str, Any] = {}
    for key, value in data.items():
        name = str(key)
        kind = schema.get(name)
        if kind is None:
            logger.debug("Ignoring unknown frontmatter key %r in %s", name, path)
            continue
        if value is None:
            continue
        values[name] = _coerce(kind, value, name, path)

    for name, kind in schema.items():
        values.setdefault(name, "" if kind == "str" else None)
    return values


def validate_fields(values: Mapping[str, Any], path: PathLike, kind: str) -> None:
    if not str(values.get("title") or "").strip():
        raise MissingFieldError("title", path, kind)
    if values.get("published_at") is None:
        raise MissingFieldError("published_at", path, kind)


def _split(raw: str, path: PathLike):
    try:
        return split_frontmatter(raw)
    except FrontmatterError as exc:
        raise FrontmatterError(str(exc), path) from exc


def parse_article(path: PathLike, raw: str) -> Article:
    """Decode, validate and render one article source."""
    frontmatter, body = _split(raw, path)
    values = decode_fields(decode_frontmatter(frontmatter, path), ARTICLE_FIELDS, path)
    validate_fields(values, path, "article")
    return Article(content=render_markdown(body), toc="", **values)


def parse_fragment(path: PathLike, raw: str) -> Fragment:
    """Decode, validate and render one fragment source."""
    frontmatter, body = _split(raw, path)
    values = decode_fields(decode_frontmatter(frontmatter, path), FRAGMENT_FIELDS, path)
    validate_fields(values, path, "fragment")
    return Fragment(content=render_markdown(body), **values)


def load_article(path: Path) -> Article:
    return parse_article(path, path.read_text(encoding="utf-8"))


def load_fragment(path: Path) -> Fragment:
    return parse_fragment(path, path.read_text(encoding="utf-8"))
