# -*- coding: utf-8 -*-
"""
기본 제공 바닐라 식별자 정의

서버 플러그인 등 호스트가 자체 열거형을 주입하지 않을 때 사용합니다.
"""

from enum import Enum

from .base import Category, CatalogSet, EnumCatalog


class Material(Enum):
    """블록/아이템 재질"""
    AIR = "air"
    STONE = "stone"
    GRANITE = "granite"
    DIORITE = "diorite"
    ANDESITE = "andesite"
    GRASS_BLOCK = "grass_block"
    DIRT = "dirt"
    COBBLESTONE = "cobblestone"
    OAK_PLANKS = "oak_planks"
    OAK_LOG = "oak_log"
    OAK_LEAVES = "oak_leaves"
    OAK_SAPLING = "oak_sapling"
    BEDROCK = "bedrock"
    WATER = "water"
    LAVA = "lava"
    SAND = "sand"
    GRAVEL = "gravel"
    GLASS = "glass"
    TALL_GRASS = "tall_grass"
    SUNFLOWER = "sunflower"
    COAL_ORE = "coal_ore"
    IRON_ORE = "iron_ore"
    GOLD_ORE = "gold_ore"
    DIAMOND_ORE = "diamond_ore"
    COAL_BLOCK = "coal_block"
    IRON_BLOCK = "iron_block"
    GOLD_BLOCK = "gold_block"
    DIAMOND_BLOCK = "diamond_block"
    EMERALD_BLOCK = "emerald_block"
    SLIME_BLOCK = "slime_block"
    CRAFTING_TABLE = "crafting_table"
    FURNACE = "furnace"
    CHEST = "chest"
    TORCH = "torch"
    TNT = "tnt"
    OBSIDIAN = "obsidian"
    COAL = "coal"
    IRON_INGOT = "iron_ingot"
    GOLD_INGOT = "gold_ingot"
    DIAMOND = "diamond"
    EMERALD = "emerald"
    STICK = "stick"
    APPLE = "apple"
    GOLDEN_APPLE = "golden_apple"
    BREAD = "bread"
    BUCKET = "bucket"
    WATER_BUCKET = "water_bucket"
    LAVA_BUCKET = "lava_bucket"
    WOODEN_SWORD = "wooden_sword"
    STONE_SWORD = "stone_sword"
    IRON_SWORD = "iron_sword"
    DIAMOND_SWORD = "diamond_sword"
    IRON_PICKAXE = "iron_pickaxe"
    DIAMOND_PICKAXE = "diamond_pickaxe"
    BOW = "bow"
    ARROW = "arrow"
    ENDER_PEARL = "ender_pearl"
    TOTEM_OF_UNDYING = "totem_of_undying"


class EntityType(Enum):
    """엔티티 종류"""
    PLAYER = "player"
    ARMOR_STAND = "armor_stand"
    ZOMBIE = "zombie"
    SKELETON = "skeleton"
    CREEPER = "creeper"
    SPIDER = "spider"
    ENDERMAN = "enderman"
    GHAST = "ghast"
    BLAZE = "blaze"
    WITCH = "witch"
    SLIME = "slime"
    PIG = "pig"
    COW = "cow"
    SHEEP = "sheep"
    CHICKEN = "chicken"
    WOLF = "wolf"
    VILLAGER = "villager"
    IRON_GOLEM = "iron_golem"
    ENDER_DRAGON = "ender_dragon"
    WITHER = "wither"


class PotionEffectType(Enum):
    """
    포션 효과 종류

    값은 효과의 표시 이름(레거시 내부 이름)이며 심볼과 다를 수 있습니다.
    """
    SPEED = "SPEED"
    SLOWNESS = "SLOW"
    HASTE = "FAST_DIGGING"
    MINING_FATIGUE = "SLOW_DIGGING"
    STRENGTH = "INCREASE_DAMAGE"
    INSTANT_HEALTH = "HEAL"
    INSTANT_DAMAGE = "HARM"
    JUMP_BOOST = "JUMP"
    NAUSEA = "CONFUSION"
    REGENERATION = "REGENERATION"
    RESISTANCE = "DAMAGE_RESISTANCE"
    FIRE_RESISTANCE = "FIRE_RESISTANCE"
    WATER_BREATHING = "WATER_BREATHING"
    INVISIBILITY = "INVISIBILITY"
    BLINDNESS = "BLINDNESS"
    NIGHT_VISION = "NIGHT_VISION"
    HUNGER = "HUNGER"
    WEAKNESS = "WEAKNESS"
    POISON = "POISON"
    WITHER = "WITHER"
    HEALTH_BOOST = "HEALTH_BOOST"
    ABSORPTION = "ABSORPTION"
    SATURATION = "SATURATION"
    GLOWING = "GLOWING"
    LEVITATION = "LEVITATION"
    LUCK = "LUCK"
    UNLUCK = "UNLUCK"
    SLOW_FALLING = "SLOW_FALLING"
    CONDUIT_POWER = "CONDUIT_POWER"
    DOLPHINS_GRACE = "DOLPHINS_GRACE"
    BAD_OMEN = "BAD_OMEN"
    HERO_OF_THE_VILLAGE = "HERO_OF_THE_VILLAGE"
    DARKNESS = "DARKNESS"

    @property
    def display_name(self) -> str:
        return self.value


class Enchantment(Enum):
    """인챈트 종류 (값은 네임스페이스 키)"""
    PROTECTION = "minecraft:protection"
    FIRE_PROTECTION = "minecraft:fire_protection"
    FEATHER_FALLING = "minecraft:feather_falling"
    BLAST_PROTECTION = "minecraft:blast_protection"
    PROJECTILE_PROTECTION = "minecraft:projectile_protection"
    RESPIRATION = "minecraft:respiration"
    AQUA_AFFINITY = "minecraft:aqua_affinity"
    THORNS = "minecraft:thorns"
    DEPTH_STRIDER = "minecraft:depth_strider"
    FROST_WALKER = "minecraft:frost_walker"
    BINDING_CURSE = "minecraft:binding_curse"
    SOUL_SPEED = "minecraft:soul_speed"
    SHARPNESS = "minecraft:sharpness"
    SMITE = "minecraft:smite"
    BANE_OF_ARTHROPODS = "minecraft:bane_of_arthropods"
    KNOCKBACK = "minecraft:knockback"
    FIRE_ASPECT = "minecraft:fire_aspect"
    LOOTING = "minecraft:looting"
    SWEEPING_EDGE = "minecraft:sweeping"
    EFFICIENCY = "minecraft:efficiency"
    SILK_TOUCH = "minecraft:silk_touch"
    UNBREAKING = "minecraft:unbreaking"
    FORTUNE = "minecraft:fortune"
    POWER = "minecraft:power"
    PUNCH = "minecraft:punch"
    FLAME = "minecraft:flame"
    INFINITY = "minecraft:infinity"
    LUCK_OF_THE_SEA = "minecraft:luck_of_the_sea"
    LURE = "minecraft:lure"
    LOYALTY = "minecraft:loyalty"
    IMPALING = "minecraft:impaling"
    RIPTIDE = "minecraft:riptide"
    CHANNELING = "minecraft:channeling"
    MULTISHOT = "minecraft:multishot"
    QUICK_CHARGE = "minecraft:quick_charge"
    PIERCING = "minecraft:piercing"
    MENDING = "minecraft:mending"
    VANISHING_CURSE = "minecraft:vanishing_curse"

    @property
    def key(self) -> str:
        """네임스페이스를 제외한 키 부분"""
        return self.value.split(':', 1)[-1]


MATERIALS = EnumCatalog(Category.MATERIAL, Material)
ENTITY_TYPES = EnumCatalog(Category.ENTITY, EntityType)
POTION_EFFECT_TYPES = EnumCatalog(
    Category.EFFECT, PotionEffectType,
    canonical=lambda effect: effect.display_name,
    aliases=lambda effect: [effect.display_name],
)
ENCHANTMENTS = EnumCatalog(
    Category.ENCHANTMENT, Enchantment,
    canonical=lambda enchantment: enchantment.key,
    aliases=lambda enchantment: [enchantment.key, enchantment.value],
)


def default_catalogs() -> CatalogSet:
    """바닐라 카탈로그 묶음 반환"""
    return CatalogSet([MATERIALS, ENTITY_TYPES, POTION_EFFECT_TYPES, ENCHANTMENTS])
