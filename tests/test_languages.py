from pathlib import Path

import pytest

from treepeek.errors import UnsupportedLanguageError
from treepeek.languages import (
    LANGUAGES,
    language_for_path,
    resolve_language,
    supported_languages,
)


@pytest.mark.parametrize(
    "name, grammar",
    [("go", "go"), ("py", "python"), ("js", "javascript"), ("yml", "yaml"), ("TS", "typescript")],
)
def test_resolve_language(name, grammar):
    assert resolve_language(name) == grammar


def test_unknown_language_lists_supported():
    with pytest.raises(UnsupportedLanguageError) as exc:
        resolve_language("cobol")
    assert "unsupported language 'cobol'" in str(exc.value)
    assert "go" in exc.value.supported
    assert exc.value.supported == sorted(exc.value.supported)


def test_registry_is_read_only():
    with pytest.raises(TypeError):
        LANGUAGES["cobol"] = "cobol"


def test_language_for_path():
    assert language_for_path(Path("main.go")) == "go"
    assert language_for_path(Path("lib/x.PY")) == "python"
    assert language_for_path(Path("notes.txt")) is None


def test_supported_languages_sorted():
    names = supported_languages()
    assert names == sorted(names)
    assert {"go", "python", "py", "rust"} <= set(names)
