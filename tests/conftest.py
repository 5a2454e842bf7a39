"""
공용 테스트 픽스처
"""

import pytest

from mc_translator.catalog import Category
from mc_translator.i18n import LanguageRegistry, MappingLoader, close_language_registry

# 테스트를 위한 모의 언어 사전
MOCK_DICTIONARIES = {
    "ja_jp": {
        "block.minecraft.stone": "石",
        "item.minecraft.stone": "石(アイテム)",
        "block.minecraft.grass": "草ブロック",
        "item.minecraft.diamond": "ダイヤモンド",
        "block.minecraft.iron": "鉄ブロック",
        "entity.minecraft.zombie": "ゾンビ",
        "entity.minecraft.player": "プレイヤー",
        "effect.minecraft.strength": "攻撃力上昇",
        "effect.minecraft.speed": "移動速度上昇",
        "effect.minecraft.wither": "衰弱",
        "enchantment.minecraft.sweeping_edge": "範囲ダメージ増加",
        "enchantment.minecraft.mending": "修繕",
    },
    "en_us": {
        "block.minecraft.stone": "Stone",
        "entity.minecraft.zombie": "Zombie",
    },
}


@pytest.fixture
def mock_loader() -> MappingLoader:
    """모의 사전을 제공하는 로더"""
    return MappingLoader(MOCK_DICTIONARIES)


@pytest.fixture
def registry(mock_loader) -> LanguageRegistry:
    """모의 사전이 주입된 LanguageRegistry"""
    return LanguageRegistry(
        loader=mock_loader,
        name_lookup_order=[Category.MATERIAL, Category.ENTITY],
    )


@pytest.fixture(autouse=True)
def reset_global_registry():
    """테스트 간 전역 레지스트리 초기화"""
    close_language_registry()
    yield
    close_language_registry()
