"""
McMaterialTranslator

마인크래프트 재질, 엔티티, 포션 효과, 인챈트 식별자를 언어별 이름으로 변환합니다.
"""

from .catalog import Category, Material, EntityType, PotionEffectType, Enchantment
from .i18n import (
    LanguageRegistry,
    McMaterialTranslator,
    get_translator,
    translate,
    translate_name,
    has_translation,
    get_all_translations
)
from .utils import TranslatorError, DictionaryLoadError

__version__ = "0.1.0"

__all__ = [
    'Category',
    'Material',
    'EntityType',
    'PotionEffectType',
    'Enchantment',
    'LanguageRegistry',
    'McMaterialTranslator',
    'get_translator',
    'translate',
    'translate_name',
    'has_translation',
    'get_all_translations',
    'TranslatorError',
    'DictionaryLoadError'
]
