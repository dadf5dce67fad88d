import pytest

from backends import Corpus
from servers.docs import DocsServer, ServerConfig

SVELTE_LINES = [
    "Svelte is reactive",
    "React is a library",
    "SVELTE 5 adds runes",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for key in (
        "DOCS_PATH",
        "DOCS_TITLE",
        "DOCS_SERVER_NAME",
        "DOCS_SERVER_VERSION",
        "DOCS_RESOURCE_URI",
        "DOCS_RESOURCE_NAME",
        "DOCS_TOOL_NAME",
        "MCP_TRANSPORT",
        "MCP_HTTP_HOST",
        "MCP_HTTP_PORT",
        "MCP_HTTP_PATH",
        "LANGFUSE_ENABLED",
        "LANGFUSE_PUBLIC_KEY",
        "LANGFUSE_SECRET_KEY",
        "LANGFUSE_HOST",
        "LOG_LEVEL",
    ):
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def svelte_corpus():
    return Corpus(text="\n".join(SVELTE_LINES))


@pytest.fixture
def docs_file(tmp_path):
    path = tmp_path / "svelte5-docs.txt"
    path.write_bytes("\n".join(SVELTE_LINES).encode("utf-8") + b"\r\nlast line\n")
    return path


@pytest.fixture
def config():
    return ServerConfig()


@pytest.fixture
def docs_server(svelte_corpus, config):
    return DocsServer(svelte_corpus, config)
