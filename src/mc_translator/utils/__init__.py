"""
공통 유틸리티 모듈
"""

from .exceptions import TranslatorError, DictionaryLoadError

__all__ = [
    'TranslatorError',
    'DictionaryLoadError'
]
