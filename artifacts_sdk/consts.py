"""Game constants: well-known item codes, prices and limits."""

CRAFT_TIME = 5
MAX_LEVEL = 45
TASK_CANCEL_PRICE = 1
TASK_EXCHANGE_PRICE = 6

DIAMOND = "diamond"
EMERALD = "emerald"
RUBY = "ruby"
SAPPHIRE = "sapphire"
TOPAZ = "topaz"

GEMS = (DIAMOND, EMERALD, RUBY, SAPPHIRE, TOPAZ)

JASPER_CRYSTAL = "jasper_crystal"
MAGICAL_CURE = "magical_cure"
ASTRALYTE_CRYSTAL = "astralyte_crystal"
ENCHANTED_FABRIC = "enchanted_fabric"

TASKS_REWARDS_SPECIFICS = (
    JASPER_CRYSTAL,
    MAGICAL_CURE,
    ASTRALYTE_CRYSTAL,
    ENCHANTED_FABRIC,
)

TASKS_COIN = "tasks_coin"

GOLD = "gold"

GOLDEN_EGG = "golden_egg"
GOLDEN_SHRIMP = "golden_shrimp"

GIFT = "gift"
GINGERBREAD = "gingerbread"

APPLE = "apple"
APPLE_PIE = "apple_pie"
EGG = "egg"
CARROT = "carrot"
MUSHROOM_SOUP = "mushroom_soup"
FISH_SOUP = "fish_soup"
COOKED_HELLHOUND_MEAT = "cooked_hellhound_meat"
MAPLE_SYRUP = "maple_syrup"

BANK_MIN_FREE_SLOT = 3
BANK_EXTENSION_SIZE = 20

BLUE_CANDY = "blue_candy"
GREEN_CANDY = "green_candy"
RED_CANDY = "red_candy"
YELLOW_CANDY = "yellow_candy"
CHRISTMAS_CANE = "christmas_cane"
CHRISTMAS_STAR = "christmas_star"
FROZEN_GLOVES = "frozen_gloves"
FROZEN_AXE = "frozen_axe"
FROZEN_FISHING_ROD = "frozen_fishing_rod"
FROZEN_PICKAXE = "frozen_pickaxe"