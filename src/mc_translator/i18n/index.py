# -*- coding: utf-8 -*-
"""
번역 인덱스

한 언어에 대해 카테고리별 식별자 -> 번역 문자열 조회 테이블을 구성합니다.
"""

import logging
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional

from ..catalog import Category, CatalogSet, IdentifierCatalog
from ..utils.exceptions import DictionaryLoadError
from .key_resolver import resolve

logger = logging.getLogger(__name__)


class TranslationIndex:
    """언어별 읽기 전용 번역 인덱스"""

    def __init__(self, language_code: str, maps: Mapping[Category, Mapping[Any, str]],
                 load_error: Optional[DictionaryLoadError] = None):
        """
        TranslationIndex 초기화

        Args:
            language_code: 언어 코드
            maps: 카테고리별 식별자 -> 번역 문자열
            load_error: 사전 로드 실패 시 원인 (성공 시 None)
        """
        self.language_code = language_code
        self.load_error = load_error

        # 모든 카테고리가 채워진 상태로만 생성됨
        self._maps: Dict[Category, Mapping[Any, str]] = {
            category: MappingProxyType(dict(maps.get(category, {})))
            for category in Category
        }

    @property
    def is_loaded(self) -> bool:
        """사전 로드 성공 여부"""
        return self.load_error is None

    def get_map(self, category: Category) -> Mapping[Any, str]:
        """카테고리의 읽기 전용 조회 테이블"""
        return self._maps[category]

    def lookup(self, category: Category, identifier: Any) -> Optional[str]:
        """번역 문자열 조회 (없으면 None)"""
        return self._maps[category].get(identifier)

    def contains(self, category: Category, identifier: Any) -> bool:
        return identifier in self._maps[category]

    def size(self, category: Optional[Category] = None) -> int:
        """번역된 식별자 개수"""
        if category is not None:
            return len(self._maps[category])
        return sum(len(m) for m in self._maps.values())

    def __repr__(self) -> str:
        counts = ", ".join(f"{c.value}={len(m)}" for c, m in self._maps.items())
        return f"TranslationIndex({self.language_code!r}, {counts})"


def build_category_map(catalog: IdentifierCatalog, raw: Mapping[str, str]) -> Dict[Any, str]:
    """
    카테고리 전체 식별자에 대해 키 해석을 수행하여 조회 테이블 생성

    해석에 실패한 식별자는 테이블에 추가되지 않습니다.
    """
    translations: Dict[Any, str] = {}

    for identifier in catalog.members():
        if identifier is None:
            continue

        value = resolve(catalog.category, catalog.key_name(identifier), raw)
        if value is not None:
            translations[identifier] = value

    return translations


def build_index(language_code: str, catalogs: CatalogSet, raw: Mapping[str, str],
                load_error: Optional[DictionaryLoadError] = None) -> TranslationIndex:
    """언어 사전으로부터 네 카테고리의 번역 인덱스 생성"""
    maps = {category: build_category_map(catalogs.get(category), raw) for category in Category}

    index = TranslationIndex(language_code, maps, load_error)
    logger.debug(f"번역 인덱스 생성: {index!r}")
    return index


def empty_index(language_code: str, load_error: Optional[DictionaryLoadError] = None) -> TranslationIndex:
    """번역이 하나도 없는 인덱스 생성 (사전 로드 실패 시)"""
    return TranslationIndex(language_code, {}, load_error)
