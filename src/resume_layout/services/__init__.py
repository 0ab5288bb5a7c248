"""Service layer: data contracts, export orchestration and repository access."""
