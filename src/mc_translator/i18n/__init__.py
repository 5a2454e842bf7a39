"""
번역 모듈

언어 사전 로드, 사전 키 해석, 언어별 번역 인덱스 및 번역기 기능을 제공합니다.
"""

from .loader import DictionaryLoader, LangFileLoader, MappingLoader
from .key_resolver import candidate_keys, resolve_key
from .index import TranslationIndex, build_index
from .registry import LanguageRegistry, get_language_registry, set_language_registry, close_language_registry
from .translator import (
    McMaterialTranslator,
    get_translator,
    translate,
    translate_name,
    has_translation,
    get_all_translations
)
from .report import find_missing_translations, generate_coverage_report

__all__ = [
    # 로더
    'DictionaryLoader',
    'LangFileLoader',
    'MappingLoader',

    # 키 해석 / 인덱스
    'candidate_keys',
    'resolve_key',
    'TranslationIndex',
    'build_index',

    # 레지스트리
    'LanguageRegistry',
    'get_language_registry',
    'set_language_registry',
    'close_language_registry',

    # 번역기
    'McMaterialTranslator',
    'get_translator',
    'translate',
    'translate_name',
    'has_translation',
    'get_all_translations',

    # 보고서
    'find_missing_translations',
    'generate_coverage_report'
]
