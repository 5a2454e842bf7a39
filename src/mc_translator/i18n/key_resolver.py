# -*- coding: utf-8 -*-
"""
사전 키 해석기

카테고리와 식별자 이름으로부터 시도할 사전 키 후보 목록을 만들고,
사전에 존재하는 첫 번째 키를 찾습니다.
"""

from typing import Dict, List, Mapping, Optional, Tuple

from ..catalog import Category

BLOCK_PREFIX = "block.minecraft."
ITEM_PREFIX = "item.minecraft."
ENTITY_PREFIX = "entity.minecraft."
EFFECT_PREFIX = "effect.minecraft."
ENCHANTMENT_PREFIX = "enchantment.minecraft."

# 카테고리별 접두사 (시도 순서대로)
CATEGORY_PREFIXES: Dict[Category, Tuple[str, ...]] = {
    Category.MATERIAL: (BLOCK_PREFIX, ITEM_PREFIX),
    Category.ENTITY: (ENTITY_PREFIX,),
    Category.EFFECT: (EFFECT_PREFIX,),
    Category.ENCHANTMENT: (ENCHANTMENT_PREFIX,),
}

BLOCK_SUFFIX = "_block"

# 재질 이름 특수 케이스
MATERIAL_OVERRIDES: Dict[str, str] = {
    "grass_block": "grass",
    "water": "water_bucket",
    "lava": "lava_bucket",
    "tall_grass": "grass",
    "sunflower": "double_plant",
}

# 엔티티 이름 특수 케이스 (현재는 이름이 그대로 유지됨)
ENTITY_OVERRIDES: Dict[str, str] = {
    "player": "player",
    "armor_stand": "armor_stand",
}

# 레거시 효과 이름 -> 현재 사전 키
EFFECT_OVERRIDES: Dict[str, str] = {
    "slow": "slowness",
    "fast_digging": "haste",
    "slow_digging": "mining_fatigue",
    "increase_damage": "strength",
    "heal": "instant_health",
    "harm": "instant_damage",
    "jump": "jump_boost",
    "confusion": "nausea",
    "regeneration": "regeneration",
    "damage_resistance": "resistance",
    "fire_resistance": "fire_resistance",
    "water_breathing": "water_breathing",
    "invisibility": "invisibility",
    "blindness": "blindness",
    "night_vision": "night_vision",
    "hunger": "hunger",
    "weakness": "weakness",
    "poison": "poison",
    "wither": "wither",
    "health_boost": "health_boost",
    "absorption": "absorption",
    "saturation": "saturation",
    "glowing": "glowing",
    "levitation": "levitation",
    "luck": "luck",
    "unluck": "unluck",
    "slow_falling": "slow_falling",
    "conduit_power": "conduit_power",
    "dolphins_grace": "dolphins_grace",
    "bad_omen": "bad_omen",
    "hero_of_the_village": "hero_of_the_village",
    "darkness": "darkness",
}

ENCHANTMENT_OVERRIDES: Dict[str, str] = {
    "sweeping": "sweeping_edge",
}


def normalize_material(name: str) -> str:
    """재질 이름을 사전 키 형식으로 변환"""
    override = MATERIAL_OVERRIDES.get(name)
    if override is not None:
        return override

    # _block 접미사 제거 (diamond_block -> diamond)
    if name.endswith(BLOCK_SUFFIX):
        return name[:-len(BLOCK_SUFFIX)]

    return name


def normalize_entity(name: str) -> str:
    """엔티티 이름을 사전 키 형식으로 변환"""
    return ENTITY_OVERRIDES.get(name, name)


def normalize_effect(name: str) -> str:
    """효과 이름을 사전 키 형식으로 변환"""
    return EFFECT_OVERRIDES.get(name, name)


def normalize_enchantment(name: str) -> str:
    """인챈트 이름을 사전 키 형식으로 변환"""
    return ENCHANTMENT_OVERRIDES.get(name, name)


NORMALIZERS = {
    Category.MATERIAL: normalize_material,
    Category.ENTITY: normalize_entity,
    Category.EFFECT: normalize_effect,
    Category.ENCHANTMENT: normalize_enchantment,
}


def candidate_keys(category: Category, key_name: str) -> List[str]:
    """
    사전 키 후보 목록 생성

    원래 이름으로 모든 접두사를 먼저 시도한 뒤 정규화된 이름으로 다시 시도합니다.
    재질은 블록 접두사가 아이템 접두사보다 우선합니다.

    Args:
        category: 카테고리
        key_name: 식별자의 키 이름 (대소문자 무관)

    Returns:
        List[str]: 중복이 제거된 후보 키 목록 (우선순위 순)
    """
    name = key_name.lower()
    prefixes = CATEGORY_PREFIXES[category]
    normalized = NORMALIZERS[category](name)

    candidates: List[str] = []
    for base in (name, normalized):
        for prefix in prefixes:
            key = prefix + base
            if key not in candidates:
                candidates.append(key)

    return candidates


def resolve_key(category: Category, key_name: str, raw: Mapping[str, str]) -> Optional[str]:
    """사전에 존재하는 첫 번째 후보 키 반환 (없으면 None)"""
    for key in candidate_keys(category, key_name):
        if key in raw:
            return key
    return None


def resolve(category: Category, key_name: str, raw: Mapping[str, str]) -> Optional[str]:
    """식별자 이름에 해당하는 번역 문자열 반환 (없으면 None)"""
    key = resolve_key(category, key_name, raw)
    if key is None:
        return None
    return raw[key]
