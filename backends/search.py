"""Search backends over the in-memory corpus."""

from abc import ABC, abstractmethod

from backends.models import Corpus, MatchSet

MAX_MATCHES = 25


class AbstractSearchClient(ABC):
    """Abstract base class for search clients."""

    @abstractmethod
    def search(self, query: str, num_results: int = MAX_MATCHES) -> MatchSet:
        """Search the corpus.

        Args:
            query: Search query string
            num_results: Maximum number of results, never above MAX_MATCHES

        Returns:
            Matching lines in document order
        """
        pass

    def format_results(self, results: MatchSet) -> str:
        """Format search results as a single text payload."""
        return results.text


class SubstringSearchClient(AbstractSearchClient):
    """Case-insensitive substring search over corpus lines."""

    def __init__(self, corpus: Corpus) -> None:
        """Initialize the search client.

        Args:
            corpus: Corpus to search
        """
        self.corpus = corpus

    def search(self, query: str, num_results: int = MAX_MATCHES) -> MatchSet:
        """Return the first matching lines; an empty query matches every line."""
        limit = max(0, min(num_results, MAX_MATCHES))
        needle = query.lower()

        matches = []
        for line in self.corpus.lines:
            if len(matches) >= limit:
                break
            if needle in line.lower():
                matches.append(line)

        return MatchSet(query=query, lines=tuple(matches))
