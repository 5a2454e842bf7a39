# -*- coding: utf-8 -*-
"""
번역기 - 게임 오브젝트 식별자를 현지화된 이름으로 변환
"""

import logging
from typing import Any, Dict, Optional, Sequence

from ..catalog import Category, CatalogSet
from ..config import Config
from .index import TranslationIndex
from .registry import get_language_registry

logger = logging.getLogger(__name__)

# None 입력 시 반환 문자열
NULL_NAME = "null"


class McMaterialTranslator:
    """
    한 언어의 번역 인덱스에 묶인 번역기

    번역이 없으면 식별자 고유 문자열을, None 이면 "null" 을 반환하며
    어떤 입력에도 예외를 발생시키지 않습니다.
    """

    def __init__(self, index: TranslationIndex, catalogs: CatalogSet,
                 name_lookup_order: Optional[Sequence[Category]] = None):
        self._index = index
        self._catalogs = catalogs
        self.name_lookup_order = list(name_lookup_order or (Category.MATERIAL, Category.ENTITY))

    @classmethod
    def get_instance(cls, language_code: Optional[str] = None) -> 'McMaterialTranslator':
        """전역 레지스트리에서 언어별 번역기 반환 (기본값: 설정된 기본 언어)"""
        if language_code is None:
            language_code = Config.DEFAULT_LANGUAGE
        return get_language_registry().get_translator(language_code)

    @property
    def language_code(self) -> str:
        return self._index.language_code

    @property
    def index(self) -> TranslationIndex:
        return self._index

    @property
    def catalogs(self) -> CatalogSet:
        return self._catalogs

    def _category_of(self, identifier: Any, category: Optional[Category]) -> Optional[Category]:
        if category is not None:
            return category
        return self._catalogs.category_of(identifier)

    def translate(self, identifier: Any, category: Optional[Category] = None) -> str:
        """
        식별자 번역

        Args:
            identifier: 카테고리 식별자 (예: Material.STONE)
            category: 카테고리 (생략 시 식별자로부터 추론)

        Returns:
            str: 번역 문자열, 번역이 없으면 식별자 고유 문자열
        """
        if identifier is None:
            return NULL_NAME

        category = self._category_of(identifier, category)
        if category is None:
            logger.debug(f"카테고리를 알 수 없는 식별자: {identifier!r}")
            return str(identifier)

        translation = self._index.lookup(category, identifier)
        if translation is not None:
            return translation

        catalog = self._catalogs.get(category)
        if not catalog.contains(identifier):
            # 지정한 카테고리와 다른 식별자는 실제 카테고리의 고유 문자열 사용
            actual = self._catalogs.category_of(identifier)
            if actual is None:
                return str(identifier)
            catalog = self._catalogs.get(actual)
        return catalog.canonical_name(identifier)

    def translate_name(self, name: str) -> str:
        """
        문자열 이름 번역

        name_lookup_order 순서대로 각 카테고리에서 이름 해석을 시도하고
        처음 성공한 카테고리의 번역을 반환합니다.

        Returns:
            str: 번역 문자열, 어떤 카테고리에도 해당하지 않으면 입력 그대로
        """
        if name is None:
            return NULL_NAME

        for category in self.name_lookup_order:
            identifier = self._catalogs.get(category).try_parse(name)
            if identifier is not None:
                return self.translate(identifier, category)

        logger.debug(f"해석할 수 없는 이름: {name}")
        return name

    def has_translation(self, identifier: Any, category: Optional[Category] = None) -> bool:
        """번역 존재 여부 확인"""
        if identifier is None:
            return False

        category = self._category_of(identifier, category)
        if category is None:
            return False

        return self._index.contains(category, identifier)

    def get_all_translations(self, category: Category = Category.MATERIAL) -> Dict[Any, str]:
        """카테고리의 전체 번역 (복사본)"""
        return dict(self._index.get_map(category))

    def get_all_entity_translations(self) -> Dict[Any, str]:
        return self.get_all_translations(Category.ENTITY)

    def get_all_effect_translations(self) -> Dict[Any, str]:
        return self.get_all_translations(Category.EFFECT)

    def get_all_enchantment_translations(self) -> Dict[Any, str]:
        return self.get_all_translations(Category.ENCHANTMENT)

    def __repr__(self) -> str:
        return f"McMaterialTranslator({self.language_code!r})"


# 편의 함수들
def get_translator(language_code: Optional[str] = None) -> McMaterialTranslator:
    """언어별 번역기 반환 (편의 함수)"""
    return McMaterialTranslator.get_instance(language_code)


def translate(identifier: Any, language_code: Optional[str] = None,
              category: Optional[Category] = None) -> str:
    """식별자 번역 (편의 함수)"""
    return get_translator(language_code).translate(identifier, category)


def translate_name(name: str, language_code: Optional[str] = None) -> str:
    """문자열 이름 번역 (편의 함수)"""
    return get_translator(language_code).translate_name(name)


def has_translation(identifier: Any, language_code: Optional[str] = None,
                    category: Optional[Category] = None) -> bool:
    """번역 존재 여부 확인 (편의 함수)"""
    return get_translator(language_code).has_translation(identifier, category)


def get_all_translations(category: Category = Category.MATERIAL,
                         language_code: Optional[str] = None) -> Dict[Any, str]:
    """카테고리의 전체 번역 (편의 함수)"""
    return get_translator(language_code).get_all_translations(category)
