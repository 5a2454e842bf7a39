"""
식별자 카탈로그 모듈

카테고리별 게임 오브젝트 열거형과 문자열 해석 기능을 제공합니다.
"""

from .base import Category, IdentifierCatalog, EnumCatalog, CatalogSet
from .vanilla import Material, EntityType, PotionEffectType, Enchantment, default_catalogs

__all__ = [
    # 기본 타입
    'Category',
    'IdentifierCatalog',
    'EnumCatalog',
    'CatalogSet',

    # 바닐라 열거형
    'Material',
    'EntityType',
    'PotionEffectType',
    'Enchantment',
    'default_catalogs'
]
