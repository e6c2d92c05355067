"""
Translation through an external gateway.
"""

from .gateway import AUTO_SOURCE_LANGUAGE, TranslationGateway, HttpTranslationGateway
from .rate_limit import RateLimitPolicy, FixedDelayPolicy, TokenBucketPolicy, NoDelayPolicy
from .orchestrator import TranslationOrchestrator, split_into_chunks, should_translate

__all__ = [
    'AUTO_SOURCE_LANGUAGE',
    'TranslationGateway',
    'HttpTranslationGateway',
    'RateLimitPolicy',
    'FixedDelayPolicy',
    'TokenBucketPolicy',
    'NoDelayPolicy',
    'TranslationOrchestrator',
    'split_into_chunks',
    'should_translate',
]
