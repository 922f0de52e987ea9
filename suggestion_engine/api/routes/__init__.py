# API Routes Module
from suggestion_engine.api.routes import website_builder

__all__ = [
    "website_builder",
]
