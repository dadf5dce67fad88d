import jinja2
import pytest

from core import PromptManager
from core.prompt_manager import DEFAULT_PROMPTS_FILE


def test_default_prompts_ship_with_core_package():
    assert DEFAULT_PROMPTS_FILE.parent.name == "core"
    assert DEFAULT_PROMPTS_FILE.is_file()


def test_renders_default_prompts():
    prompts = PromptManager()

    title = prompts.render_prompt("tools.search.title", docs_title="Svelte 5")

    assert title == "Search Svelte 5 Docs"


def test_custom_file(tmp_path):
    path = tmp_path / "prompts.yaml"
    path.write_text("tools:\n  search:\n    title: 'Find {{ what }}'\n", encoding="utf-8")

    prompts = PromptManager(path)

    assert prompts.render_prompt("tools.search.title", what="docs") == "Find docs"


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        PromptManager(tmp_path / "nope.yaml")


def test_missing_key():
    with pytest.raises(ValueError, match="not found"):
        PromptManager().load_prompt("tools.unknown")


def test_key_below_a_string():
    with pytest.raises(ValueError, match="not found"):
        PromptManager().load_prompt("tools.search.title.extra")


def test_non_string_prompt():
    with pytest.raises(ValueError, match="not a string"):
        PromptManager().render_prompt("tools.search")


def test_undefined_variable_fails():
    with pytest.raises(jinja2.UndefinedError):
        PromptManager().render_prompt("tools.search.title")
