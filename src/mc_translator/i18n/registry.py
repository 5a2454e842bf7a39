# -*- coding: utf-8 -*-
"""
언어 레지스트리 - 언어 코드별 번역 인덱스 관리
"""

import logging
import threading
from typing import Callable, Dict, List, Optional, Sequence

from ..catalog import Category, CatalogSet, default_catalogs
from ..config import Config
from ..utils.exceptions import DictionaryLoadError
from .index import TranslationIndex, build_index, empty_index
from .loader import DictionaryLoader, LangFileLoader

logger = logging.getLogger(__name__)

LoadErrorCallback = Callable[[DictionaryLoadError], None]


class LanguageRegistry:
    """
    언어 코드 -> 번역 인덱스 캐시

    인덱스는 최초 요청 시 한 번만 생성되며, 완성된 후에만 등록됩니다.
    등록된 인덱스는 제거되거나 다시 생성되지 않습니다.
    """

    def __init__(self, loader: Optional[DictionaryLoader] = None,
                 catalogs: Optional[CatalogSet] = None,
                 on_load_error: Optional[LoadErrorCallback] = None,
                 name_lookup_order: Optional[Sequence[Category]] = None):
        """
        LanguageRegistry 초기화

        Args:
            loader: 언어 사전 로더 (기본값: 설정된 lang 디렉토리)
            catalogs: 카테고리별 식별자 카탈로그 (기본값: 바닐라)
            on_load_error: 사전 로드 실패 통지 콜백
            name_lookup_order: 이름 기반 번역 시 카테고리 시도 순서
        """
        self.loader = loader if loader is not None else LangFileLoader(Config.LANG_DIR)
        self.catalogs = catalogs if catalogs is not None else default_catalogs()
        self.on_load_error = on_load_error
        self.name_lookup_order = (
            list(name_lookup_order) if name_lookup_order is not None
            else Config.get_name_lookup_order()
        )

        self._indexes: Dict[str, TranslationIndex] = {}
        self._build_locks: Dict[str, threading.Lock] = {}
        self._lock = threading.Lock()

        logger.debug("LanguageRegistry 초기화")

    def get_index(self, language_code: str) -> TranslationIndex:
        """
        언어 코드의 번역 인덱스 반환

        최초 호출 시 사전을 로드하고 인덱스를 생성합니다.
        같은 언어에 대한 동시 호출은 하나의 생성 결과를 공유합니다.

        Args:
            language_code: 언어 코드 (대소문자 구분)

        Returns:
            TranslationIndex: 번역 인덱스 (로드 실패 시 빈 인덱스)
        """
        index = self._indexes.get(language_code)
        if index is not None:
            return index

        with self._lock:
            build_lock = self._build_locks.setdefault(language_code, threading.Lock())

        with build_lock:
            # 대기하는 동안 다른 스레드가 등록했을 수 있음
            index = self._indexes.get(language_code)
            if index is not None:
                return index

            index = self._build(language_code)

            with self._lock:
                self._indexes[language_code] = index
                self._build_locks.pop(language_code, None)

        return index

    def _build(self, language_code: str) -> TranslationIndex:
        """사전 로드 후 인덱스 생성"""
        try:
            raw = self.loader.load(language_code)
        except DictionaryLoadError as e:
            logger.warning(f"{e} - 번역 없이 진행")
            self._report_load_error(e)
            return empty_index(language_code, e)
        except Exception as e:
            error = DictionaryLoadError(language_code, str(e) or type(e).__name__)
            logger.error(f"{error} - 번역 없이 진행", exc_info=True)
            self._report_load_error(error)
            return empty_index(language_code, error)

        index = build_index(language_code, self.catalogs, raw)
        logger.info(f"번역 인덱스 등록: {language_code} ({index.size()}개)")
        return index

    def _report_load_error(self, error: DictionaryLoadError) -> None:
        if self.on_load_error is None:
            return
        try:
            self.on_load_error(error)
        except Exception as e:
            logger.error(f"로드 실패 콜백 오류: {e}", exc_info=True)

    def get_translator(self, language_code: str):
        """언어 코드의 번역기 반환"""
        from .translator import McMaterialTranslator

        return McMaterialTranslator(
            self.get_index(language_code), self.catalogs, self.name_lookup_order
        )

    def is_loaded(self, language_code: str) -> bool:
        """인덱스가 이미 생성되었는지 확인"""
        return language_code in self._indexes

    def loaded_languages(self) -> List[str]:
        """생성된 인덱스의 언어 코드 목록"""
        return sorted(self._indexes.keys())

    def get_load_error(self, language_code: str) -> Optional[DictionaryLoadError]:
        """사전 로드 실패 원인 (미생성 또는 성공 시 None)"""
        index = self._indexes.get(language_code)
        if index is None:
            return None
        return index.load_error


# 전역 LanguageRegistry 인스턴스
_language_registry: Optional[LanguageRegistry] = None
_registry_lock = threading.Lock()


def get_language_registry() -> LanguageRegistry:
    """
    전역 LanguageRegistry 인스턴스 반환

    Returns:
        LanguageRegistry: LanguageRegistry 인스턴스
    """
    global _language_registry

    if _language_registry is None:
        with _registry_lock:
            if _language_registry is None:
                _language_registry = LanguageRegistry()

    return _language_registry


def set_language_registry(registry: LanguageRegistry) -> None:
    """전역 LanguageRegistry 교체 (호스트 주입용)"""
    global _language_registry

    with _registry_lock:
        _language_registry = registry
    logger.info("전역 LanguageRegistry 교체")


def close_language_registry() -> None:
    """전역 LanguageRegistry 종료"""
    global _language_registry

    with _registry_lock:
        if _language_registry:
            _language_registry = None
            logger.info("LanguageRegistry 종료 완료")
