# -*- coding: utf-8 -*-
"""
번역 커버리지 보고서

언어별로 번역되지 않은 식별자를 찾고 완성도를 집계합니다.
"""

import logging
from datetime import datetime
from typing import Any, Dict, List

from ..catalog import Category
from .translator import McMaterialTranslator

logger = logging.getLogger(__name__)


def find_missing_translations(translator: McMaterialTranslator) -> Dict[str, List[str]]:
    """
    번역이 없는 식별자 찾기

    Args:
        translator: 검사할 번역기

    Returns:
        Dict[str, List[str]]: 카테고리별 번역 누락 식별자 고유 문자열 목록
    """
    missing_translations = {}

    for category in Category:
        catalog = translator.catalogs.get(category)
        missing = [
            catalog.canonical_name(identifier)
            for identifier in catalog.members()
            if not translator.has_translation(identifier, category)
        ]

        if missing:
            missing_translations[category.value] = sorted(missing)

    logger.debug(f"누락된 번역 검사 완료: {translator.language_code}")
    return missing_translations


def generate_coverage_report(translator: McMaterialTranslator) -> Dict[str, Any]:
    """
    번역 커버리지 보고서 생성

    Returns:
        Dict[str, Any]: 카테고리별 전체/번역 개수 및 완성도
    """
    index = translator.index
    report = {
        'timestamp': datetime.now().isoformat(),
        'language_code': translator.language_code,
        'loaded': index.is_loaded,
        'load_error': str(index.load_error) if index.load_error else None,
        'total': 0,
        'translated': 0,
        'categories': {},
        'missing_translations': {},
    }

    for category in Category:
        total = len(translator.catalogs.get(category))
        translated = index.size(category)

        report['categories'][category.value] = {
            'total': total,
            'translated': translated,
            'completion_rate': translated / total * 100 if total else 0
        }
        report['total'] += total
        report['translated'] += translated

    report['completion_rate'] = (
        report['translated'] / report['total'] * 100 if report['total'] else 0
    )
    report['missing_translations'] = find_missing_translations(translator)

    logger.info(
        f"번역 커버리지 보고서 생성: {translator.language_code} "
        f"({report['translated']}/{report['total']})"
    )
    return report
