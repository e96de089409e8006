"""Global search engine instance to avoid circular imports."""

from .core.engine import SearchEngine
from .config import get_settings

# Global search engine instance, populated by the application lifespan
settings = get_settings()
search_engine = SearchEngine(
    default_limit=settings.default_search_limit,
    default_suggestion_limit=settings.default_suggestion_limit
)
