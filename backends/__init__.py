"""Backend implementations for corpus loading, search and content fetching."""

from .content_fetcher import AbstractContentFetcher, CorpusContentFetcher
from .corpus import CorpusLoadError, load_corpus
from .models import Corpus, MatchSet, ResourceDescriptor, SearchRequest
from .search import MAX_MATCHES, AbstractSearchClient, SubstringSearchClient

__all__ = [
    "AbstractSearchClient",
    "SubstringSearchClient",
    "MAX_MATCHES",
    "AbstractContentFetcher",
    "CorpusContentFetcher",
    "CorpusLoadError",
    "load_corpus",
    "Corpus",
    "MatchSet",
    "ResourceDescriptor",
    "SearchRequest",
]
