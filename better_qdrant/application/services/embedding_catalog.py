"""
Static catalog of recommended embedding services and the vector sizes they produce.
Used to help pick a provider whose dimension matches an existing collection.
"""

from better_qdrant.domain.entities.validation import EmbeddingServiceRecommendation

RECOMMENDATIONS: tuple[EmbeddingServiceRecommendation, ...] = (
    EmbeddingServiceRecommendation(
        service="openai",
        model="text-embedding-ada-002",
        dimension=1536,
        use_case="General purpose, high quality embeddings",
        pros=["High quality", "Widely supported", "Good for production"],
        cons=["Requires API key", "Costs money per request"],
    ),
    EmbeddingServiceRecommendation(
        service="ollama",
        model="nomic-embed-text",
        dimension=768,
        use_case="Local embeddings, privacy-focused",
        pros=["Free", "Local processing", "No API key needed"],
        cons=["Requires local Ollama installation", "Smaller vector size"],
    ),
    EmbeddingServiceRecommendation(
        service="fastembed",
        model="BAAI/bge-small-en-v1.5",
        dimension=384,
        use_case="Fast local embeddings, minimal resource usage",
        pros=["Very fast", "Small footprint", "No network required"],
        cons=["Smallest vector size", "Limited language support"],
    ),
    EmbeddingServiceRecommendation(
        service="openrouter",
        model="openai/text-embedding-ada-002",
        dimension=1536,
        use_case="OpenAI-compatible with multiple providers",
        pros=["Multiple provider options", "OpenAI compatibility"],
        cons=["Requires API key", "Variable pricing"],
    ),
)


def recommendations_for_dimension(dimension: int) -> list[EmbeddingServiceRecommendation]:
    """Return the catalogued services whose default model produces *dimension*-long vectors."""
    return [rec for rec in RECOMMENDATIONS if rec.dimension == dimension]
