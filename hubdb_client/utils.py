import re
from importlib.metadata import version
from typing import Any, Mapping
from urllib.parse import quote

PLACEHOLDER_PATTERN = re.compile(r":([A-Za-z_]\w*)")


def merge_options(*sources: Mapping | None) -> dict:
    """
    Merge option mappings into a new dict.

    Sources are applied left to right, so a later source wins on key collision:
    merge_options(defaults, base, caller, overrides). `None` sources are skipped
    and no source is modified.
    """
    merged: dict = {}
    for source in sources:
        if source:
            merged.update(source)
    return merged


def fill_url_template(template: str, params: Mapping[str, Any]) -> str:
    def replace(match: re.Match) -> str:
        key = match.group(1)
        if params.get(key) is None:
            raise ValueError(f"missing value for '{key}' in '{template}'")
        # one path segment, `/` and `?` in a value must not reach the URL as is
        return quote(str(params[key]), safe="")

    return PLACEHOLDER_PATTERN.sub(replace, template)


def build_query_params(options: Mapping[str, Any]) -> list[tuple[str, str]]:
    params = []
    for key, value in options.items():
        if value is None:
            continue
        # lists are sent as repeated parameters, ie `property=a&property=b`
        values = value if isinstance(value, (list, tuple)) else [value]
        for v in values:
            if isinstance(v, bool):
                v = "true" if v else "false"
            params.append((key, str(v)))
    return params


def get_app_version() -> str:
    """Get the version from the installed package metadata."""
    try:
        return version("hubdb-client")
    except Exception:
        return "unknown"
