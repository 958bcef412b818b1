from .corpus import Corpus, Builder, Built, BuildResult

__all__ = ["Corpus", "Builder", "Built", "BuildResult"]
