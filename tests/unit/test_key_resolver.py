"""
사전 키 해석기 단위 테스트
"""

import pytest

from mc_translator.catalog import Category
from mc_translator.i18n.key_resolver import (
    EFFECT_OVERRIDES,
    candidate_keys,
    normalize_effect,
    normalize_enchantment,
    normalize_entity,
    normalize_material,
    resolve,
    resolve_key
)


class TestNormalizers:
    """이름 정규화 테스트"""

    def test_material_overrides(self):
        """재질 특수 케이스 테스트"""
        assert normalize_material('grass_block') == 'grass'
        assert normalize_material('water') == 'water_bucket'
        assert normalize_material('lava') == 'lava_bucket'
        assert normalize_material('tall_grass') == 'grass'
        assert normalize_material('sunflower') == 'double_plant'

    def test_material_block_suffix(self):
        """_block 접미사 제거 테스트"""
        assert normalize_material('diamond_block') == 'diamond'
        assert normalize_material('slime_block') == 'slime'

        # 접미사가 없으면 그대로
        assert normalize_material('stone') == 'stone'
        assert normalize_material('blockade') == 'blockade'

    def test_entity_passthrough(self):
        """엔티티 이름은 그대로 유지"""
        assert normalize_entity('player') == 'player'
        assert normalize_entity('armor_stand') == 'armor_stand'
        assert normalize_entity('zombie') == 'zombie'

    def test_effect_legacy_names(self):
        """레거시 효과 이름 변환 테스트"""
        assert normalize_effect('increase_damage') == 'strength'
        assert normalize_effect('heal') == 'instant_health'
        assert normalize_effect('harm') == 'instant_damage'
        assert normalize_effect('jump') == 'jump_boost'
        assert normalize_effect('confusion') == 'nausea'
        assert normalize_effect('damage_resistance') == 'resistance'
        assert normalize_effect('slow') == 'slowness'
        assert normalize_effect('fast_digging') == 'haste'
        assert normalize_effect('slow_digging') == 'mining_fatigue'

        # 알 수 없는 이름은 그대로
        assert normalize_effect('custom_effect') == 'custom_effect'

    def test_effect_override_table_is_lowercase(self):
        """효과 변환 테이블 키/값은 모두 소문자"""
        for legacy, current in EFFECT_OVERRIDES.items():
            assert legacy == legacy.lower()
            assert current == current.lower()

    def test_enchantment_rename(self):
        """인챈트 이름 변환 테스트"""
        assert normalize_enchantment('sweeping') == 'sweeping_edge'
        assert normalize_enchantment('sharpness') == 'sharpness'


class TestCandidateKeys:
    """후보 키 생성 테스트"""

    def test_material_candidates_order(self):
        """재질 후보는 블록 -> 아이템 -> 정규화 블록 -> 정규화 아이템 순"""
        assert candidate_keys(Category.MATERIAL, 'GRASS_BLOCK') == [
            'block.minecraft.grass_block',
            'item.minecraft.grass_block',
            'block.minecraft.grass',
            'item.minecraft.grass',
        ]

    def test_material_candidates_deduplicated(self):
        """정규화 결과가 같으면 중복 후보 없음"""
        assert candidate_keys(Category.MATERIAL, 'STONE') == [
            'block.minecraft.stone',
            'item.minecraft.stone',
        ]

    def test_entity_candidates(self):
        assert candidate_keys(Category.ENTITY, 'ZOMBIE') == ['entity.minecraft.zombie']

    def test_effect_candidates(self):
        assert candidate_keys(Category.EFFECT, 'INCREASE_DAMAGE') == [
            'effect.minecraft.increase_damage',
            'effect.minecraft.strength',
        ]

    def test_enchantment_candidates(self):
        assert candidate_keys(Category.ENCHANTMENT, 'sweeping') == [
            'enchantment.minecraft.sweeping',
            'enchantment.minecraft.sweeping_edge',
        ]


class TestResolve:
    """사전 키 해석 테스트"""

    def test_block_before_item(self):
        """블록 키가 아이템 키보다 우선"""
        raw = {
            'item.minecraft.stone': 'Stone Item',
            'block.minecraft.stone': 'Stone Block',
        }
        assert resolve_key(Category.MATERIAL, 'stone', raw) == 'block.minecraft.stone'
        assert resolve(Category.MATERIAL, 'stone', raw) == 'Stone Block'

    def test_direct_name_before_override(self):
        """원래 이름이 정규화 이름보다 우선"""
        raw = {
            'block.minecraft.water': 'Water',
            'item.minecraft.water_bucket': 'Water Bucket',
        }
        assert resolve(Category.MATERIAL, 'WATER', raw) == 'Water'

    def test_item_direct_before_block_normalized(self):
        """원래 이름의 아이템 키가 정규화된 블록 키보다 우선"""
        raw = {
            'item.minecraft.iron_block': 'Iron Block Item',
            'block.minecraft.iron': 'Iron',
        }
        assert resolve(Category.MATERIAL, 'iron_block', raw) == 'Iron Block Item'

    def test_override_only(self):
        """정규화 이름으로만 찾을 수 있는 키"""
        raw = {'block.minecraft.grass': 'Grass'}
        assert resolve(Category.MATERIAL, 'GRASS_BLOCK', raw) == 'Grass'

    def test_no_match(self):
        """일치하는 키가 없으면 None"""
        raw = {'block.minecraft.stone': 'Stone'}
        assert resolve_key(Category.MATERIAL, 'dirt', raw) is None
        assert resolve(Category.ENTITY, 'stone', raw) is None

    @pytest.mark.parametrize('category, name, key', [
        (Category.ENTITY, 'ARMOR_STAND', 'entity.minecraft.armor_stand'),
        (Category.EFFECT, 'HEAL', 'effect.minecraft.instant_health'),
        (Category.ENCHANTMENT, 'SWEEPING', 'enchantment.minecraft.sweeping_edge'),
    ])
    def test_category_prefixes(self, category, name, key):
        """카테고리별 접두사 테스트"""
        raw = {key: 'value'}
        assert resolve_key(category, name, raw) == key
