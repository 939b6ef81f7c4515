from __future__ import annotations

from speller.api.main import spellcheck_service

try:
    from fastmcp import FastMCP
except ImportError as exc:  # pragma: no cover - runtime dependency guard
    raise RuntimeError(
        "FastMCP is required to run the MCP server. Install the project dependencies first."
    ) from exc


SERVER_TITLE = "Speller"
SERVER_INSTRUCTIONS = (
    "Use correct_spelling to fix misspelled words in a piece of text and "
    "is_known_word to check a single word against the primary spelling model."
)

mcp = FastMCP(
    name=SERVER_TITLE,
    instructions=SERVER_INSTRUCTIONS,
    version="1",
)


def correct_spelling(text: str) -> str:
    """Return `text` with misspelled words corrected, or unchanged if nothing was fixed."""
    response = spellcheck_service.suggest(text)
    return response.suggestion or text


def is_known_word(word: str) -> bool:
    """Whether the primary spelling model contains `word`."""
    return spellcheck_service.lookup(word).known


mcp.tool(name="correct_spelling", description="Correct the spelling of words in a text.")(correct_spelling)
mcp.tool(name="is_known_word", description="Check whether a word is in the spelling model.")(is_known_word)


if __name__ == "__main__":
    mcp.run("http")
