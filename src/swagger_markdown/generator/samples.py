"""Code sample generator: renders an example API call per client language."""

import json
from collections.abc import Callable
from typing import Any

from pydantic import BaseModel, ConfigDict

from swagger_markdown.errors import UnsupportedLanguageError
from swagger_markdown.parser.base import Parameter

INDENT = "    "


class RequestDescriptor(BaseModel):
    """Everything a code sample needs to know about one call."""

    model_config = ConfigDict(frozen=True)

    uri: str
    method: str
    headers: dict[str, str]
    query: list[Parameter] = []
    body: Parameter | None = None

    @property
    def body_example(self) -> Any:
        return self.body.example if self.body is not None else None


class Language(BaseModel):
    code: str
    name: str
    render: Callable[[RequestDescriptor], str]


_LANGUAGES: dict[str, Language] = {}


def register_language(code: str, name: str):
    """Register a sample template under ``code`` (the Markdown fence info string)."""

    def decorator(func: Callable[[RequestDescriptor], str]) -> Callable[[RequestDescriptor], str]:
        _LANGUAGES[code] = Language(code=code, name=name, render=func)
        return func

    return decorator


def supported_languages() -> list[str]:
    return list(_LANGUAGES)


def get_language(code: str) -> Language:
    try:
        return _LANGUAGES[code]
    except KeyError:
        raise UnsupportedLanguageError(
            f"No code sample template for '{code}' (supported: {', '.join(_LANGUAGES)})"
        ) from None


def render_sample(language: str, request: RequestDescriptor) -> str:
    """Render the example call for ``request`` in ``language``."""
    return get_language(language).render(request)


def _strip_newlines(value: Any) -> Any:
    if isinstance(value, str):
        return value.replace("\n", "")
    if isinstance(value, dict):
        return {_strip_newlines(key): _strip_newlines(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_strip_newlines(item) for item in value]
    return value


def compact_json(example: Any) -> str:
    """Single-line JSON with newlines removed from every string."""
    return json.dumps(_strip_newlines(example), separators=(",", ":"), ensure_ascii=False, default=str)


def _quoted(text: str) -> str:
    """Double-quoted literal, valid in C# and Java source."""
    return json.dumps(text, ensure_ascii=False)


@register_language("curl", "cURL")
def render_curl(request: RequestDescriptor) -> str:
    lines = [f"curl -X {request.method} {request.uri}"]
    lines.extend(f'  -H "{name}: {value}"' for name, value in request.headers.items())
    if request.body_example is not None:
        body = compact_json(request.body_example).replace("'", "'\\''")
        lines.append(f"  -d '{body}'")
    return " \\\n".join(lines)


@register_language("cs", "C#")
def render_csharp(request: RequestDescriptor) -> str:
    method = request.method.capitalize()
    lines = [
        "using (var httpClient = new HttpClient())",
        "{",
        f"{INDENT}var request = new HttpRequestMessage(HttpMethod.{method}, {_quoted(request.uri)});",
    ]
    for name, value in request.headers.items():
        lines.append(f"{INDENT}request.Headers.TryAddWithoutValidation({_quoted(name)}, {_quoted(value)});")
    if request.body_example is not None:
        body = _quoted(compact_json(request.body_example))
        lines.append(f'{INDENT}request.Content = new StringContent({body}, Encoding.UTF8, "application/json");')
    lines.append(f"{INDENT}var response = await httpClient.SendAsync(request).ConfigureAwait(false);")
    lines.append("}")
    return "\n".join(lines)


@register_language("java", "Java")
def render_java(request: RequestDescriptor) -> str:
    lines = [
        f"URL url = new URL({_quoted(request.uri)});",
        "HttpURLConnection con = (HttpURLConnection) url.openConnection();",
        f'con.setRequestMethod("{request.method}");',
    ]
    for name, value in request.headers.items():
        lines.append(f"con.setRequestProperty({_quoted(name)}, {_quoted(value)});")
    if request.body_example is not None:
        lines.append("con.setDoOutput(true);")
        lines.append(f"String input = {_quoted(compact_json(request.body_example))};")
        lines.append("try (OutputStream os = con.getOutputStream()) {")
        lines.append(f"{INDENT}os.write(input.getBytes(StandardCharsets.UTF_8));")
        lines.append("}")
    lines.append("int responseCode = con.getResponseCode();")
    return "\n".join(lines)


@register_language("python", "Python")
def render_python(request: RequestDescriptor) -> str:
    lines = [
        "import requests",
        "",
        "response = requests.request(",
        f"{INDENT}{_quoted(request.method)},",
        f"{INDENT}{_quoted(request.uri)},",
        f"{INDENT}headers={{",
    ]
    lines.extend(f"{INDENT * 2}{_quoted(name)}: {_quoted(value)}," for name, value in request.headers.items())
    lines.append(f"{INDENT}}},")
    if request.body_example is not None:
        lines.append(f"{INDENT}data={compact_json(request.body_example)!r},")
    lines.append(")")
    return "\n".join(lines)
