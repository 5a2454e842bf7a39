# -*- coding: utf-8 -*-
"""환경 설정 관리 모듈"""

import logging
import os
from typing import Any, List, Optional

from dotenv import load_dotenv

from .catalog import Category

logger = logging.getLogger(__name__)

# .env 파일 로드 (이미 설정된 환경 변수는 덮어쓰지 않음)
load_dotenv()


class Config:
    """환경 변수 기반 설정 관리 클래스"""

    @staticmethod
    def get_env(key: str, default: Any = None) -> Any:
        """환경 변수 값을 가져옵니다.

        Args:
            key: 환경 변수 키
            default: 기본값

        Returns:
            환경 변수 문자열 또는 기본값
        """
        return os.getenv(key, default)

    # 언어 설정
    DEFAULT_LANGUAGE = get_env.__func__('MC_TRANSLATOR_DEFAULT_LANGUAGE', 'ja_jp')
    LANG_DIR: Optional[str] = get_env.__func__('MC_TRANSLATOR_LANG_DIR', None) or None

    # 문자열 이름 조회 시 시도할 카테고리 순서
    NAME_LOOKUP_ORDER = get_env.__func__('MC_TRANSLATOR_NAME_LOOKUP_ORDER', 'material,entity')

    # 개발 설정
    LOG_LEVEL = get_env.__func__('LOG_LEVEL', 'INFO')

    @classmethod
    def get_name_lookup_order(cls, raw: Optional[str] = None) -> List[Category]:
        """이름 기반 번역에서 사용할 카테고리 순서를 반환합니다.

        알 수 없는 카테고리 이름은 경고 후 무시합니다.
        """
        if raw is None:
            raw = cls.NAME_LOOKUP_ORDER

        order: List[Category] = []
        for part in raw.split(','):
            name = part.strip()
            if not name:
                continue

            category = Category.from_name(name)
            if category is None:
                logger.warning(f"알 수 없는 카테고리 무시: {name}")
                continue

            if category not in order:
                order.append(category)

        if not order:
            logger.warning(f"유효한 카테고리가 없어 기본 순서 사용: {raw!r}")
            order = [Category.MATERIAL, Category.ENTITY]

        return order
