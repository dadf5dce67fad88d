"""Content fetchers backing the corpus resource."""

from abc import ABC, abstractmethod

from backends.models import Corpus


class AbstractContentFetcher(ABC):
    """Abstract base class for content fetchers."""

    @abstractmethod
    def get_content(self) -> str:
        """Get the full document content.

        Returns:
            Document text
        """
        pass


class CorpusContentFetcher(AbstractContentFetcher):
    """Serves the loaded corpus text unmodified."""

    def __init__(self, corpus: Corpus) -> None:
        self.corpus = corpus

    def get_content(self) -> str:
        return self.corpus.text
